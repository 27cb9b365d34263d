"""Tests for Webflow item normalization."""

from __future__ import annotations

from search_sync.constants import ContentCollection
from search_sync.services.indexing.lookups import ReferenceLookups
from search_sync.services.indexing.normalizer import build_url, normalize_item
from tests.conftest import webflow_item

BLOGS = ContentCollection("blogs", "blog-col", "/blog")
CASE_STUDIES = ContentCollection("caseStudies", "cs-col", "/case-studies")


def _lookups() -> ReferenceLookups:
    return ReferenceLookups(
        authors={
            "auth-1": {"name": "Jane Doe", "photo": "https://cdn.test/jane.png"},
            "auth-nameless": {"name": "", "photo": None},
        },
        resource_types={"rt-blog": {"name": "Blog"}, "rt-case": {"name": "Case Study"}},
        use_cases={"uc-1": {"name": "Fraud"}, "uc-2": {"name": "Compliance"}},
        industries={"ind-1": {"name": "Banking"}},
    )


def test_normalize_full_item():
    item = webflow_item(
        "item-1",
        name="Hello World",
        slug="hello-world",
        excerpt="Short excerpt",
        image={"url": "https://cdn.test/hello.png"},
        **{
            "publish-date": "2024-03-01T00:00:00.000Z",
            "resource-types": "rt-blog",
            "use-cases": ["uc-2", "uc-1"],
            "industries": ["ind-1"],
            "author": "auth-1",
        },
    )

    result = normalize_item(item, BLOGS, _lookups())

    assert result.model_dump(by_alias=True) == {
        "id": "item-1",
        "collection": "blogs",
        "resourceType": "Blog",
        "title": "Hello World",
        "slug": "hello-world",
        "url": "/blog/hello-world",
        "excerpt": "Short excerpt",
        "thumbnail": "https://cdn.test/hello.png",
        "publishedDate": "2024-03-01T00:00:00.000Z",
        "author": {"name": "Jane Doe", "photo": "https://cdn.test/jane.png"},
        "useCases": ["Compliance", "Fraud"],
        "industries": ["Banking"],
    }


def test_resource_types_takes_precedence_over_resource_type():
    item = webflow_item(
        "item-2", **{"resource-types": "rt-blog", "resource-type": "rt-case"}
    )

    assert normalize_item(item, BLOGS, _lookups()).resource_type == "Blog"


def test_resource_type_fallback_field():
    item = webflow_item("item-3", **{"resource-type": "rt-case"})

    assert normalize_item(item, CASE_STUDIES, _lookups()).resource_type == "Case Study"


def test_unresolvable_resource_type_is_null():
    item = webflow_item("item-4", **{"resource-types": "rt-unknown"})

    assert normalize_item(item, BLOGS, _lookups()).resource_type is None


def test_missing_fields_keep_empty_string_and_null_defaults():
    result = normalize_item(webflow_item("bare"), CASE_STUDIES, _lookups())

    assert result.title == ""
    assert result.slug == ""
    assert result.excerpt == ""
    assert result.url == "/case-studies"
    assert result.thumbnail is None
    assert result.published_date is None
    assert result.resource_type is None
    assert result.author is None
    assert result.use_cases == []
    assert result.industries == []

    dumped = result.model_dump(by_alias=True)
    assert dumped["author"] is None
    assert dumped["publishedDate"] is None


def test_title_falls_back_to_title_field():
    item = webflow_item("item-5", name="", title="Webinar Title")

    assert normalize_item(item, BLOGS, _lookups()).title == "Webinar Title"


def test_excerpt_fallback_chain():
    summary = webflow_item("a", **{"post-summary": "Summary", "description": "Desc"})
    description = webflow_item("b", description="Desc")

    assert normalize_item(summary, BLOGS, _lookups()).excerpt == "Summary"
    assert normalize_item(description, BLOGS, _lookups()).excerpt == "Desc"


def test_thumbnail_fallback_chain():
    thumb = webflow_item(
        "a",
        image={"url": ""},
        thumbnail={"url": "https://cdn.test/thumb.png"},
        **{"featured-image": {"url": "https://cdn.test/featured.png"}},
    )
    featured = webflow_item("b", **{"featured-image": {"url": "https://cdn.test/featured.png"}})

    assert normalize_item(thumb, BLOGS, _lookups()).thumbnail == "https://cdn.test/thumb.png"
    assert normalize_item(featured, BLOGS, _lookups()).thumbnail == "https://cdn.test/featured.png"


def test_published_date_fallback_chain():
    item = webflow_item("a", date="2023-01-01", **{"published-date": "2023-02-02"})

    assert normalize_item(item, BLOGS, _lookups()).published_date == "2023-02-02"


def test_author_with_unknown_reference_has_null_fields():
    item = webflow_item("a", author="auth-missing")

    author = normalize_item(item, BLOGS, _lookups()).author

    assert author is not None
    assert author.name is None
    assert author.photo is None


def test_author_fields_are_independently_nullable():
    item = webflow_item("a", author="auth-nameless")

    author = normalize_item(item, BLOGS, _lookups()).author

    assert author.model_dump() == {"name": None, "photo": None}


def test_multi_references_drop_unknown_ids():
    item = webflow_item(
        "a", **{"use-cases": ["uc-1", "nope", "uc-2"], "industries": "ind-1"}
    )

    result = normalize_item(item, BLOGS, _lookups())

    assert result.use_cases == ["Fraud", "Compliance"]
    assert result.industries == []


def test_malformed_values_degrade_to_defaults():
    item = webflow_item(
        "a",
        name=42,
        slug=["not", "a", "slug"],
        image="https://cdn.test/not-an-object.png",
        author=["auth-1"],
        **{"resource-types": ["rt-blog"]},
    )

    result = normalize_item(item, BLOGS, _lookups())

    assert result.title == ""
    assert result.slug == ""
    assert result.url == "/blog"
    assert result.thumbnail is None
    assert result.resource_type is None
    assert result.author.model_dump() == {"name": None, "photo": None}


def test_build_url():
    assert build_url(BLOGS, "post") == "/blog/post"
    assert build_url(BLOGS, "") == "/blog"


def test_non_text_reference_names_do_not_break_normalization():
    lookups = ReferenceLookups(
        authors={"auth-odd": {"name": 7, "photo": None}},
        resource_types={"rt-odd": {"name": ["Blog"]}},
        use_cases={"uc-odd": {"name": 2024}, "uc-1": {"name": "Fraud"}},
        industries={"ind-odd": {"name": {"en": "Banking"}}},
    )
    item = webflow_item(
        "a",
        author="auth-odd",
        industries=["ind-odd"],
        **{"resource-types": "rt-odd", "use-cases": ["uc-odd", "uc-1"]},
    )

    result = normalize_item(item, BLOGS, lookups)

    assert result.resource_type is None
    assert result.use_cases == ["Fraud"]
    assert result.industries == []
    assert result.author.model_dump() == {"name": None, "photo": None}


def test_wrongly_typed_candidates_fall_through_to_later_fields():
    item = webflow_item(
        "a",
        name={"rich": True},
        title="Real title",
        excerpt=["not", "text"],
        description="Plain description",
        image={"url": {"src": "https://cdn.test/nested.png"}},
        thumbnail={"url": "https://cdn.test/thumb.png"},
        **{"resource-types": ["rt-blog"], "resource-type": "rt-case"},
    )

    result = normalize_item(item, CASE_STUDIES, _lookups())

    assert result.title == "Real title"
    assert result.excerpt == "Plain description"
    assert result.thumbnail == "https://cdn.test/thumb.png"
    assert result.resource_type == "Case Study"
