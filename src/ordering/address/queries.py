"""Address reads."""

from protean.utils.globals import current_domain

from ordering.address.address import Address
from shared.listing import ListQuery, page, run_list_query


class AddressQuery(ListQuery):
    sort_by: str = "receiver_name"
    user_id: str | None = None
    receiver_name: str | None = None
    receiver_phone: str | None = None
    address: str | None = None
    zip_code: str | None = None


def list_addresses(query: AddressQuery) -> dict:
    lookups = {
        "user_id": query.user_id,
        "receiver_name__icontains": query.receiver_name,
        "receiver_phone__icontains": query.receiver_phone,
        "address__icontains": query.address,
        "zip_code": query.zip_code,
    }
    rows, length = run_list_query(Address, query, lookups)
    return page([row.to_view() for row in rows], length)


def get_address(address_id: str) -> dict:
    return current_domain.repository_for(Address).get(address_id).to_view()
