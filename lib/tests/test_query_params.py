from __future__ import annotations

from chimp_client.params import BasicQueryParams, ExtendedQueryParams, QueryParams, encode_query_params


class _Filters:
    def params(self) -> dict[str, str]:
        return {"foo": "", "bar": "baz"}


def test_custom_type_satisfies_protocol() -> None:
    assert isinstance(_Filters(), QueryParams)


def test_encode_drops_empty_values() -> None:
    assert encode_query_params(_Filters()) == {"bar": "baz"}


def test_encode_none_means_no_params() -> None:
    assert encode_query_params(None) == {}


def test_encode_accepts_plain_mapping() -> None:
    assert encode_query_params({"count": "10", "status": ""}) == {"count": "10"}


def test_basic_params_join_field_lists() -> None:
    params = BasicQueryParams(
        status="subscribed",
        fields=("id", "email_address"),
        exclude_fields=("_links",),
    )
    assert encode_query_params(params) == {
        "status": "subscribed",
        "fields": "id,email_address",
        "exclude_fields": "_links",
    }


def test_extended_params_omit_zero_paging() -> None:
    assert encode_query_params(ExtendedQueryParams(sort_field="created")) == {"sort_field": "created"}
    assert encode_query_params(ExtendedQueryParams(count=50, offset=100)) == {"count": "50", "offset": "100"}
