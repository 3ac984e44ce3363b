import dataclasses
from decimal import Decimal

import pytest

from bank.modules.accounts import Account, AccountNotFoundError
from bank.modules.transfers import TransferError, TransferErrorKind
from bank.modules.transfers.validator import TransferValidator, ValidatedTransfer


class FakeAccountReader:
    """In-memory account lookup that records every id it is asked for."""

    def __init__(self, *accounts: Account) -> None:
        self.accounts = {account.id: account for account in accounts}
        self.calls: list[int] = []

    async def get_account(self, account_id: int) -> Account:
        self.calls.append(account_id)
        try:
            return self.accounts[account_id]
        except KeyError:
            raise AccountNotFoundError(account_id) from None


@pytest.fixture()
def reader() -> FakeAccountReader:
    return FakeAccountReader(
        Account(id=1, owner="alice", balance="1000", currency="USD"),
        Account(id=2, owner="bob", balance="1000", currency="USD"),
        Account(id=3, owner="carol", balance="1000", currency="EUR"),
        Account(id=4, owner="dave", balance="not-a-number", currency="USD"),
    )


@pytest.mark.asyncio
async def test_admits_valid_transfer(reader):
    validated = await TransferValidator(reader).validate("alice", 1, 2, "100")

    assert isinstance(validated, ValidatedTransfer)
    assert validated.from_account_id == 1
    assert validated.to_account_id == 2
    assert validated.amount == Decimal("100")
    assert reader.calls == [1, 2]


@pytest.mark.asyncio
async def test_exact_balance_is_enough(reader):
    validated = await TransferValidator(reader).validate("alice", 1, 2, "1000.00")
    assert validated.amount == Decimal("1000")


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", ["", "abc", "1,000", "NaN", "12..5"])
async def test_malformed_amount_fails_before_any_lookup(reader, amount):
    with pytest.raises(TransferError) as exc_info:
        await TransferValidator(reader).validate("alice", 1, 2, amount)

    assert exc_info.value.kind is TransferErrorKind.INVALID_AMOUNT
    assert reader.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("amount", ["-50", "0", "0.00", "-0"])
async def test_non_positive_amount_fails_before_any_lookup(reader, amount):
    with pytest.raises(TransferError) as exc_info:
        await TransferValidator(reader).validate("alice", 1, 2, amount)

    assert exc_info.value.kind is TransferErrorKind.NEGATIVE_AMOUNT
    assert reader.calls == []


@pytest.mark.asyncio
async def test_non_owner_is_rejected_without_reading_destination(reader):
    with pytest.raises(TransferError) as exc_info:
        await TransferValidator(reader).validate("mallory", 1, 2, "100")

    assert exc_info.value.kind is TransferErrorKind.INVALID_OWNER
    assert reader.calls == [1]


@pytest.mark.asyncio
async def test_owner_check_runs_before_balance_check(reader):
    with pytest.raises(TransferError) as exc_info:
        await TransferValidator(reader).validate("mallory", 1, 2, "10000")

    assert exc_info.value.kind is TransferErrorKind.INVALID_OWNER


@pytest.mark.asyncio
async def test_insufficient_balance_is_rejected_without_reading_destination(reader):
    with pytest.raises(TransferError) as exc_info:
        await TransferValidator(reader).validate("alice", 1, 2, "10000")

    assert exc_info.value.kind is TransferErrorKind.INSUFFICIENT_BALANCE
    assert reader.calls == [1]


@pytest.mark.asyncio
async def test_currency_mismatch_is_rejected(reader):
    with pytest.raises(TransferError) as exc_info:
        await TransferValidator(reader).validate("alice", 1, 3, "100")

    assert exc_info.value.kind is TransferErrorKind.CURRENCY_MISMATCH
    assert reader.calls == [1, 3]


@pytest.mark.asyncio
async def test_lookup_errors_propagate_unchanged(reader):
    validator = TransferValidator(reader)

    with pytest.raises(AccountNotFoundError):
        await validator.validate("alice", 99, 2, "100")
    with pytest.raises(AccountNotFoundError):
        await validator.validate("alice", 1, 99, "100")


@pytest.mark.asyncio
async def test_unreadable_stored_balance_is_internal(reader):
    with pytest.raises(TransferError) as exc_info:
        await TransferValidator(reader).validate("dave", 4, 1, "1")

    assert exc_info.value.kind is TransferErrorKind.INTERNAL


@pytest.mark.asyncio
async def test_validation_is_repeatable(reader):
    validator = TransferValidator(reader)

    first = await validator.validate("alice", 1, 2, "100")
    second = await validator.validate("alice", 1, 2, "100")

    assert first == second


def test_validated_transfer_cannot_be_built_directly():
    with pytest.raises(TypeError):
        ValidatedTransfer(from_account_id=1, to_account_id=2, amount=Decimal("1"))
    with pytest.raises(TypeError):
        ValidatedTransfer(1, 2, Decimal("1"), object())


@pytest.mark.asyncio
async def test_validated_transfer_cannot_be_copied_with_new_values(reader):
    validated = await TransferValidator(reader).validate("alice", 1, 2, "100")

    with pytest.raises(TypeError):
        dataclasses.replace(validated, amount=Decimal("-500"))
    with pytest.raises(TypeError):
        dataclasses.replace(validated, to_account_id=3)
