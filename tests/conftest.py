import pytest

from models import Expense, Group, Ledger, Member, Settlement, SplitDetail


@pytest.fixture
def alice():
    return Member(id="alice-id", name="Alice", created_at="2024-01-01T00:00:00.000Z")


@pytest.fixture
def bob():
    return Member(id="bob-id", name="Bob", created_at="2024-01-01T00:00:00.000Z")


@pytest.fixture
def charlie():
    return Member(id="charlie-id", name="Charlie", created_at="2024-01-01T00:00:00.000Z")


@pytest.fixture
def members(alice, bob, charlie):
    return [alice, bob, charlie]


@pytest.fixture
def group(members):
    return Group(id="group-1", name="Trip", member_ids=[m.id for m in members])


@pytest.fixture
def dinner(members):
    return Expense(
        id="exp-1",
        group_id="group-1",
        description="Dinner",
        amount=6000,
        paid_by_member_id="alice-id",
        split_type="equal",
        split_details=[SplitDetail(m.id, 1) for m in members],
        created_at="2024-01-01T00:00:00.000Z",
    )


@pytest.fixture
def ledger(group, members, dinner):
    settlement = Settlement(
        id="set-1",
        group_id="group-1",
        from_member_id="charlie-id",
        to_member_id="alice-id",
        amount=2000,
        created_at="2024-01-05T00:00:00.000Z",
    )
    coffee = Expense(
        id="exp-2",
        group_id="group-1",
        description="Coffee",
        amount=1000,
        paid_by_member_id="bob-id",
        split_type="shares",
        split_details=[SplitDetail("alice-id", 1), SplitDetail("bob-id", 1)],
        created_at="2024-02-01T00:00:00.000Z",
    )
    return Ledger(group=group, members=members, expenses=[dinner, coffee], settlements=[settlement])
