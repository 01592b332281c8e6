"""SqlCardRepository against a real SQLite file."""

from decimal import Decimal

import pytest
from sqlalchemy import text

from cashcards.infrastructure.database.repositories import SqlCardRepository
from cashcards.modules.cards import (
    CardNotFoundError,
    CardStoreError,
    CashCard,
    Direction,
    PageRequest,
    SortField,
    SortOrder,
)


@pytest.fixture
def repository(test_db):
    return SqlCardRepository(test_db)


async def test_insert_assigns_increasing_ids(repository):
    first = await repository.insert(owner="sarah1", amount=Decimal("10.00"))
    second = await repository.insert(owner="kumar2", amount=Decimal("20.00"))

    assert first.id > 102
    assert second.id > first.id
    assert first.owner == "sarah1"
    assert first.amount == Decimal("10.00")


async def test_get_by_id_ignores_owner(repository):
    card = await repository.get_by_id(102)
    assert card == CashCard(id=102, amount=Decimal("200.00"), owner="kumar2")
    assert await repository.get_by_id(1000) is None


async def test_get_by_id_and_owner_filters_in_the_query(repository):
    assert (await repository.get_by_id_and_owner(99, "sarah1")).amount == Decimal("123.45")
    assert await repository.get_by_id_and_owner(102, "sarah1") is None
    assert await repository.get_by_id_and_owner(1000, "sarah1") is None


async def test_list_by_owner_sorts_and_counts(repository):
    page = await repository.list_by_owner("sarah1", PageRequest.of(0, 20))

    assert [card.id for card in page.items] == [100, 99, 101]
    assert page.total == 3
    assert all(card.owner == "sarah1" for card in page.items)

    desc = await repository.list_by_owner(
        "sarah1",
        PageRequest.of(0, 20, [SortOrder(SortField.AMOUNT, Direction.DESC)]),
    )
    assert [card.id for card in desc.items] == [101, 99, 100]


async def test_list_by_owner_out_of_range_page_is_empty(repository):
    page = await repository.list_by_owner("sarah1", PageRequest.of(5, 20))
    assert page.items == []
    assert page.total == 3


async def test_equal_amounts_keep_insertion_order_across_pages(repository):
    inserted = [await repository.insert(owner="tie", amount=Decimal("5.00")) for _ in range(4)]

    seen = []
    for number in range(4):
        page = await repository.list_by_owner("tie", PageRequest.of(number, 1))
        seen.extend(card.id for card in page.items)

    assert seen == [card.id for card in inserted]


async def test_update_replaces_amount(repository):
    card = await repository.get_by_id(99)
    await repository.update(card.with_amount(Decimal("19.99")))

    assert (await repository.get_by_id(99)).amount == Decimal("19.99")


async def test_update_of_unknown_id_raises(repository):
    with pytest.raises(CardNotFoundError):
        await repository.update(CashCard(id=99999, amount=Decimal("1.00"), owner="sarah1"))


async def test_exists(repository):
    assert await repository.exists(101)
    assert not await repository.exists(1000)


async def test_database_failures_become_store_errors(repository, test_db):
    await test_db.execute(text("DROP TABLE cash_cards"))

    with pytest.raises(CardStoreError):
        await repository.get_by_id(99)


async def test_ids_beyond_integer_range_are_absent(repository):
    huge = 10**20

    assert await repository.get_by_id(huge) is None
    assert await repository.get_by_id(-huge) is None
    assert await repository.get_by_id_and_owner(huge, "sarah1") is None
    assert not await repository.exists(huge)
    with pytest.raises(CardNotFoundError):
        await repository.update(CashCard(id=huge, amount=Decimal("1.00"), owner="sarah1"))


async def test_offset_beyond_integer_range_is_an_empty_page(repository):
    page = await repository.list_by_owner("sarah1", PageRequest.of(10**18, 20))

    assert page.items == []
    assert page.total == 3
    assert not page.has_next
