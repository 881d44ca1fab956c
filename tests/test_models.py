"""モデルと例外のユニットテスト"""

import pytest

from poke_paging import (
    Item,
    MalformedResponseError,
    PageEnvelope,
    PageParams,
    PagingConfig,
    PagingConfigError,
    PagingError,
    PagingErrorCodes,
    TransportError,
)


def test_item_from_dict() -> None:
    """辞書から Item を生成できること。"""
    item = Item.from_dict({"url": "https://pokeapi.co/api/v2/pokemon/1/", "name": "bulbasaur"})
    assert item.url == "https://pokeapi.co/api/v2/pokemon/1/"
    assert item.name == "bulbasaur"


def test_item_from_dict_missing_name() -> None:
    """name 欠落で MalformedResponseError になること。"""
    with pytest.raises(MalformedResponseError) as exc_info:
        Item.from_dict({"url": "u1"})
    assert exc_info.value.code == PagingErrorCodes.MALFORMED_RESPONSE


def test_item_is_immutable() -> None:
    """Item は変更できないこと。"""
    item = Item(url="u1", name="bulbasaur")
    with pytest.raises(AttributeError):
        item.name = "ivysaur"  # type: ignore[misc]


def test_page_envelope_from_dict() -> None:
    """辞書から PageEnvelope を生成でき、results の順序が保たれること。"""
    envelope = PageEnvelope.from_dict(
        {
            "count": 1000,
            "previous": None,
            "next": "/pokemon/?offset=20&limit=20",
            "results": [
                {"url": "u1", "name": "bulbasaur"},
                {"url": "u2", "name": "ivysaur"},
            ],
        }
    )
    assert envelope.count == 1000
    assert envelope.previous is None
    assert envelope.next == "/pokemon/?offset=20&limit=20"
    assert [i.name for i in envelope.results] == ["bulbasaur", "ivysaur"]


def test_page_envelope_empty_and_missing_cursors_are_terminal() -> None:
    """previous / next の空文字・欠落は None になること。"""
    envelope = PageEnvelope.from_dict({"count": 0, "previous": "", "results": []})
    assert envelope.previous is None
    assert envelope.next is None
    assert envelope.results == ()


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"results": []},
        {"count": "10", "results": []},
        {"count": True, "results": []},
        {"count": 1},
        {"count": 1, "results": {}},
        {"count": 1, "next": 5, "results": []},
        {"count": 1, "results": ["bulbasaur"]},
    ],
)
def test_page_envelope_rejects_malformed(data: object) -> None:
    """封筒形式に合わない場合 MalformedResponseError になること。"""
    with pytest.raises(MalformedResponseError):
        PageEnvelope.from_dict(data)


def test_page_params_to_query() -> None:
    assert PageParams(offset="40", limit="20").to_query() == {"offset": "40", "limit": "20"}


def test_paging_config_defaults() -> None:
    """デフォルト値が元アプリの定数と一致すること。"""
    config = PagingConfig()
    assert config.initial_load_size_hint == 20
    assert config.page_size == 20
    assert config.prefetch_distance == 10


@pytest.mark.parametrize(
    "kwargs",
    [{"initial_load_size_hint": 0}, {"page_size": 0}, {"prefetch_distance": -1}],
)
def test_paging_config_rejects_out_of_range(kwargs: dict[str, int]) -> None:
    with pytest.raises(PagingConfigError) as exc_info:
        PagingConfig(**kwargs)
    assert exc_info.value.code == PagingErrorCodes.INVALID_CONFIG


def test_transport_error_with_cause() -> None:
    """TransportError に cause と status_code を設定できること。"""
    cause = OSError("connection reset")
    error = TransportError("request failed", status_code=503, cause=cause)
    assert isinstance(error, PagingError)
    assert error.code == PagingErrorCodes.TRANSPORT_ERROR
    assert error.status_code == 503
    assert error.__cause__ is cause


def test_paging_error_str() -> None:
    """__str__ が 'CODE: message' 形式であること。"""
    error = MalformedResponseError("empty response body")
    assert str(error) == "MALFORMED_RESPONSE: empty response body"
