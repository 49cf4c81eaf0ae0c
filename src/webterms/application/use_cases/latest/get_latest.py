"""Get latest manifest use case."""

from webterms.domain.services import LatestUrls, Manifest, build_latest


class GetLatestUseCase:
    """Recompute the latest manifest from the full document set."""

    def __init__(self, unit_of_work_factory: type, urls: LatestUrls | None = None) -> None:
        self._uow_factory = unit_of_work_factory
        self._urls = urls or LatestUrls()

    async def execute(self) -> Manifest:
        async with self._uow_factory() as uow:
            records = await uow.documents.list_all()
        return build_latest(records, self._urls)
