import asyncio
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from bank.db.models import Entry as EntryModel
from bank.db.models import Transfer as TransferModel
from bank.infrastructure.database.repositories.account_repository import SqlAccountRepository
from bank.modules.transfers import TransferError, TransferErrorKind
from bank.modules.transfers.models import TransferRequest
from bank.modules.transfers.service import TransferHistoryService, TransferService


@pytest.fixture()
async def accounts(seed):
    await seed.user("alice")
    await seed.user("bob")
    alice_usd = await seed.account("alice", "USD", "1000")
    bob_usd = await seed.account("bob", "USD", "1000")
    bob_eur = await seed.account("bob", "EUR", "1000")
    return alice_usd, bob_usd, bob_eur


@pytest.mark.asyncio
@pytest.mark.integration
async def test_transfer_runs_validation_then_execution(database, accounts):
    alice_usd, bob_usd, _ = accounts

    result = await TransferService(database).transfer(
        TransferRequest(username="alice", from_account_id=alice_usd.id, to_account_id=bob_usd.id, amount="100")
    )

    assert result.from_account.balance == "900"
    assert result.to_account.balance == "1100"


@pytest.mark.asyncio
@pytest.mark.integration
@pytest.mark.parametrize(
    "username, amount, target, kind",
    [
        ("alice", "-50", "usd", TransferErrorKind.NEGATIVE_AMOUNT),
        ("alice", "ten", "usd", TransferErrorKind.INVALID_AMOUNT),
        ("bob", "100", "usd", TransferErrorKind.INVALID_OWNER),
        ("alice", "10000", "usd", TransferErrorKind.INSUFFICIENT_BALANCE),
        ("alice", "100", "eur", TransferErrorKind.CURRENCY_MISMATCH),
        ("alice", "100", "missing", TransferErrorKind.ACCOUNT_NOT_FOUND),
    ],
)
async def test_rejections_leave_no_trace(database, seed, accounts, username, amount, target, kind):
    alice_usd, bob_usd, bob_eur = accounts
    to_account_id = {"usd": bob_usd.id, "eur": bob_eur.id, "missing": 9999}[target]

    with pytest.raises(TransferError) as exc_info:
        await TransferService(database).transfer(
            TransferRequest(
                username=username,
                from_account_id=alice_usd.id,
                to_account_id=to_account_id,
                amount=amount,
            )
        )

    assert exc_info.value.kind is kind
    assert (await seed.get_account(alice_usd.id)).balance == "1000"
    assert await seed.count(EntryModel) == 0
    assert await seed.count(TransferModel) == 0


@pytest.mark.asyncio
@pytest.mark.integration
async def test_lookup_failure_is_internal(database, accounts, monkeypatch):
    alice_usd, bob_usd, _ = accounts

    async def broken_get_by_id(self, account_id):
        raise OperationalError("SELECT accounts", {}, Exception("connection reset"))

    monkeypatch.setattr(SqlAccountRepository, "get_by_id", broken_get_by_id)

    with pytest.raises(TransferError) as exc_info:
        await TransferService(database).transfer(
            TransferRequest(username="alice", from_account_id=alice_usd.id, to_account_id=bob_usd.id, amount="1")
        )

    assert exc_info.value.kind is TransferErrorKind.INTERNAL


@pytest.mark.asyncio
@pytest.mark.integration
async def test_opposite_direction_transfers_all_complete(database, seed, accounts):
    alice_usd, bob_usd, _ = accounts
    service = TransferService(database)
    rounds = 10

    def request(username, from_id, to_id):
        return TransferRequest(username=username, from_account_id=from_id, to_account_id=to_id, amount="10")

    jobs = []
    for _ in range(rounds):
        jobs.append(service.transfer(request("alice", alice_usd.id, bob_usd.id)))
        jobs.append(service.transfer(request("bob", bob_usd.id, alice_usd.id)))

    results = await asyncio.wait_for(asyncio.gather(*jobs), timeout=60)

    assert len(results) == 2 * rounds
    for result in results:
        assert Decimal(result.from_entry.amount) + Decimal(result.to_entry.amount) == 0
    final_alice = await seed.get_account(alice_usd.id)
    final_bob = await seed.get_account(bob_usd.id)
    assert Decimal(final_alice.balance) == Decimal("1000")
    assert Decimal(final_bob.balance) == Decimal("1000")
    assert await seed.count(EntryModel) == 4 * rounds
    assert await seed.count(TransferModel) == 2 * rounds


@pytest.mark.asyncio
@pytest.mark.integration
async def test_concurrent_drain_never_goes_negative(database, seed, accounts):
    alice_usd, bob_usd, _ = accounts
    service = TransferService(database)

    outcomes = await asyncio.gather(
        *[
            service.transfer(
                TransferRequest(
                    username="alice",
                    from_account_id=alice_usd.id,
                    to_account_id=bob_usd.id,
                    amount="300",
                )
            )
            for _ in range(6)
        ],
        return_exceptions=True,
    )

    succeeded = [outcome for outcome in outcomes if not isinstance(outcome, BaseException)]
    failed = [outcome for outcome in outcomes if isinstance(outcome, BaseException)]
    assert len(succeeded) == 3
    assert all(isinstance(exc, TransferError) for exc in failed)
    assert all(exc.kind is TransferErrorKind.INSUFFICIENT_BALANCE for exc in failed)
    assert (await seed.get_account(alice_usd.id)).balance == "100"
    assert (await seed.get_account(bob_usd.id)).balance == "1900"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_history_lists_both_directions(database, accounts):
    alice_usd, bob_usd, _ = accounts
    service = TransferService(database)
    await service.transfer(
        TransferRequest(username="alice", from_account_id=alice_usd.id, to_account_id=bob_usd.id, amount="5")
    )
    await service.transfer(
        TransferRequest(username="bob", from_account_id=bob_usd.id, to_account_id=alice_usd.id, amount="2")
    )

    async with database.session() as session:
        history = await TransferHistoryService.with_session(session).list_transfers(alice_usd.id)

    assert [(t.from_account_id, t.to_account_id, t.amount) for t in history] == [
        (alice_usd.id, bob_usd.id, "5"),
        (bob_usd.id, alice_usd.id, "2"),
    ]
