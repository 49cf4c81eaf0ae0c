"""Unit tests for latest selection and the manifest."""

import json
from datetime import UTC, datetime

from webterms.domain.entities import LatestEntry
from webterms.domain.services import (
    LatestUrls,
    build_latest,
    compare_by_recency,
    manifest_from_dict,
    manifest_to_dict,
    select_latest,
    select_latest_by_slug,
)
from webterms.domain.value_objects import DocType

from tests.conftest import make_record, make_scope


def test_newer_effective_date_wins_over_higher_version() -> None:
    old = make_record(make_scope(effective_date="2024-01-01"), version=5)
    new = make_record(make_scope(effective_date="2024-06-01"), version=1)
    latest = build_latest([new, old])
    assert latest["web"]["terms"]["it"].id == str(new.id)


def test_higher_version_wins_on_same_date() -> None:
    scope = make_scope()
    v1 = make_record(scope, version=1)
    v2 = make_record(scope, version=2)
    assert build_latest([v2, v1])["web"]["terms"]["it"].version == 2


def test_created_at_breaks_remaining_ties() -> None:
    scope = make_scope()
    early = make_record(scope, version=1, created_at=datetime(2024, 1, 1, tzinfo=UTC))
    late = make_record(scope, version=1, created_at=datetime(2024, 1, 2, tzinfo=UTC))
    assert compare_by_recency(early, late) < 0
    assert compare_by_recency(late, early) > 0
    assert compare_by_recency(early, early) == 0
    assert build_latest([late, early])["web"]["terms"]["it"].id == str(late.id)


def test_deleted_records_never_appear() -> None:
    scope = make_scope()
    alive = make_record(scope, version=1)
    deleted = make_record(scope, version=2, deleted=True)
    assert build_latest([alive, deleted])["web"]["terms"]["it"].id == str(alive.id)
    assert build_latest([deleted]) == {}


def test_lines_collapse_last_seen_group_wins() -> None:
    retail = make_record(make_scope(line="retail", effective_date="2025-01-01"))
    business = make_record(make_scope(line="business", effective_date="2024-01-01"))
    latest = build_latest([retail, business])
    entry = latest["web"]["terms"]["it"]
    assert entry.line == "business"
    assert entry.id == str(business.id)


def test_manifest_nesting_and_urls() -> None:
    terms = make_record(make_scope(lang="en"))
    privacy = make_record(make_scope(platform="app", doc_type=DocType.PRIVACY))
    latest = build_latest([terms, privacy], LatestUrls(public_base="/p", api_base="/api"))
    assert set(latest) == {"web", "app"}
    entry = latest["web"]["terms"]["en"]
    assert entry.url == "/p/terms_web_en.pdf"
    assert entry.download_url == f"/api/documents/{terms.id}/download"
    assert entry.sha256 == terms.content_hash
    assert latest["app"]["privacy"]["it"].effective_date == "2024-01-01"


def test_select_latest_across_lines() -> None:
    a = make_record(make_scope(line="a", effective_date="2024-01-01"))
    b = make_record(make_scope(line="b", effective_date="2024-05-01"))
    other_lang = make_record(make_scope(lang="en", effective_date="2030-01-01"))
    assert select_latest([a, b, other_lang], "web", DocType.TERMS, "it") is b
    assert select_latest([a, b], "web", DocType.COOKIE, "it") is None


def test_select_latest_later_record_wins_full_tie() -> None:
    scope = make_scope()
    first = make_record(scope)
    second = make_record(scope)
    assert select_latest([first, second], "web", DocType.TERMS, "it") is second


def test_manifest_json_round_trip() -> None:
    latest = build_latest([make_record(make_scope(line="retail"))])
    data = json.loads(json.dumps(manifest_to_dict(latest)))
    entry = data["web"]["terms"]["it"]
    assert set(entry) == {"id", "line", "version", "effectiveDate", "sha256", "url", "downloadUrl"}
    assert manifest_from_dict(data) == latest
    assert isinstance(manifest_from_dict(data)["web"]["terms"]["it"], LatestEntry)


def test_select_latest_by_slug_resolves_every_manifest_url() -> None:
    records = [
        make_record(make_scope(lang="pt-BR")),
        make_record(make_scope(platform="acme.io")),
        make_record(make_scope(platform="my_app")),
        make_record(make_scope(lang="en_GB", doc_type=DocType.COOKIE)),
    ]
    manifest = build_latest(records)
    urls = [
        entry.url
        for by_type in manifest.values()
        for by_lang in by_type.values()
        for entry in by_lang.values()
    ]
    assert len(urls) == len(records)
    for url in urls:
        slug = url.removeprefix("/v1/public/").removesuffix(".pdf")
        found = select_latest_by_slug(records, slug)
        assert found is not None
        assert url.endswith(f"/{found.scope.doc_type}_{found.scope.platform}_{found.scope.lang}.pdf")


def test_select_latest_by_slug_skips_deleted_and_unknown() -> None:
    alive = make_record(version=1)
    deleted = make_record(version=2, deleted=True)
    assert select_latest_by_slug([alive, deleted], "terms_web_it") is alive
    assert select_latest_by_slug([alive], "terms_web_en") is None
    assert select_latest_by_slug([alive], "nonsense") is None
