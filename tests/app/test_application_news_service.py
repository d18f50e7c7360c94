import pytest

from newsroom.application.news_service import NewsService, parse_post_id
from newsroom.domain.errors import NotFoundError, StoreReadError, ValidationError
from newsroom.infrastructure.news_store import SupabaseNewsStore


@pytest.fixture
def service(fake_supabase):
    return NewsService(SupabaseNewsStore(fake_supabase, "news_posts", "replace_news_posts"))


def test_list_posts_skips_invalid_rows(service, fake_supabase, sample_row):
    fake_supabase.raw_data = [sample_row, "garbage"]
    result = service.list_posts()
    assert result["count"] == 1
    assert result["items"][0]["showOnHome"] is False


def test_list_posts_non_list_data_is_empty(service, fake_supabase):
    fake_supabase.raw_data = {"unexpected": True}
    assert service.list_posts() == {"ok": True, "count": 0, "items": []}


def test_list_posts_propagates_read_failure(service, fake_supabase):
    fake_supabase.fail_with()
    with pytest.raises(StoreReadError):
        service.list_posts()


@pytest.mark.parametrize(
    "body, message",
    [
        (None, "Invalid JSON body"),
        ([], "Invalid JSON body"),
        ({"date": "2024-01-01", "category": "주보"}, "title is required"),
        ({"title": "  ", "date": "2024-01-01", "category": "주보"}, "title is required"),
        ({"title": "a", "category": "주보"}, "date is required (YYYY-MM-DD)"),
        ({"title": "a", "date": "2024-01-01"}, "invalid category"),
        ({"title": "a", "date": "2024-01-01", "category": "주보", "views": -1}, "views must be a non-negative integer"),
    ],
)
def test_create_post_validation(service, fake_supabase, body, message):
    with pytest.raises(ValidationError) as exc_info:
        service.create_post(body)
    assert exc_info.value.message == message
    assert not fake_supabase.calls


def test_create_post_inserts_defaults(service, fake_supabase):
    result = service.create_post({"title": "a", "date": "2024-01-01", "category": "주보"})

    _, op, row, _ = fake_supabase.calls[0]
    assert op == "insert"
    assert row == {
        "title": "a",
        "date": "2024-01-01",
        "category": "주보",
        "content": "",
        "views": 0,
        "is_new": False,
        "show_on_home": False,
        "file_url": None,
        "file_name": None,
        "file_size": None,
        "image_url": None,
    }
    assert result["item"]["id"] == 1


def test_replace_posts_requires_array(service):
    with pytest.raises(ValidationError):
        service.replace_posts({"title": "a"})


def test_replace_posts_single_rpc(service, fake_supabase):
    result = service.replace_posts([
        {"title": "a", "date": "2024-01-01", "category": "주보"},
        {"id": 9, "title": "b", "date": "2024-01-02", "category": "행사안내"},
    ])
    assert result == {"ok": True, "count": 2}
    assert len(fake_supabase.calls) == 1
    function, op, params, _ = fake_supabase.calls[0]
    assert (function, op) == ("replace_news_posts", "rpc")
    assert params["rows"][1]["id"] == 9


def test_replace_posts_empty_array(service, fake_supabase, sample_row):
    fake_supabase.rows = [sample_row]
    assert service.replace_posts([]) == {"ok": True, "count": 0}
    assert fake_supabase.rows == []


def test_update_post_rejects_bad_category(service, fake_supabase):
    with pytest.raises(ValidationError):
        service.update_post(7, {"category": "invalid"})
    assert not fake_supabase.calls


def test_update_post_missing_row(service):
    with pytest.raises(NotFoundError):
        service.update_post(123, {"title": "x"})


def test_delete_post_does_not_check_existence(service, fake_supabase):
    assert service.delete_post(999999) == {"ok": True}
    assert fake_supabase.calls[0][1] == "delete"


@pytest.mark.parametrize("raw, expected", [("7", 7), (" 12 ", 12), (42, 42)])
def test_parse_post_id_accepts_positive_integers(raw, expected):
    assert parse_post_id(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "0", "-1", "abc", "1e3", "٣"])
def test_parse_post_id_rejects_everything_else(raw):
    with pytest.raises(ValidationError):
        parse_post_id(raw)
