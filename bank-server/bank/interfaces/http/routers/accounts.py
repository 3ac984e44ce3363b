"""Account endpoints for the authenticated user."""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from bank.interfaces.http.deps import (
    get_account_service,
    get_current_username,
    get_db_session,
    get_owned_account,
    get_transfer_history_service,
)
from bank.modules.accounts import (
    Account,
    AccountListInput,
    CurrencyAlreadyExistsError,
    OwnerNotFoundError,
    UnsupportedCurrencyError,
)
from bank.modules.accounts.service import AccountService
from bank.modules.entries.service import EntryService
from bank.modules.transfers.service import TransferHistoryService
from bank.schemas import AccountCreate, AccountResponse, EntryResponse, TransferResponse

router = APIRouter()

MAX_PAGE_SIZE = 100


@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED, summary="Open an account")
async def create_account(
    payload: AccountCreate,
    username: str = Depends(get_current_username),
    db: AsyncSession = Depends(get_db_session),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    try:
        account = await service.create_account(username, payload.currency)
    except UnsupportedCurrencyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="unsupported currency") from exc
    except OwnerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="owner does not exist") from exc
    except CurrencyAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="an account in this currency already exists",
        ) from exc
    await db.commit()
    return AccountResponse.model_validate(account)


@router.get("", response_model=list[AccountResponse], summary="List own accounts")
async def list_accounts(
    page_id: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    username: str = Depends(get_current_username),
    service: AccountService = Depends(get_account_service),
) -> list[AccountResponse]:
    accounts = await service.list_accounts(
        AccountListInput(owner=username, page_id=page_id, page_size=page_size)
    )
    return [AccountResponse.model_validate(account) for account in accounts]


@router.get("/{account_id}", response_model=AccountResponse, summary="Get one account")
async def get_account(account: Account = Depends(get_owned_account)) -> AccountResponse:
    return AccountResponse.model_validate(account)


@router.get("/{account_id}/entries", response_model=list[EntryResponse], summary="Ledger entries of an account")
async def list_entries(
    page_id: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    account: Account = Depends(get_owned_account),
    db: AsyncSession = Depends(get_db_session),
) -> list[EntryResponse]:
    entries = await EntryService.with_session(db).list_entries(
        account.id,
        limit=page_size,
        offset=(page_id - 1) * page_size,
    )
    return [EntryResponse.model_validate(entry) for entry in entries]


@router.get("/{account_id}/transfers", response_model=list[TransferResponse], summary="Transfers touching an account")
async def list_transfers(
    page_id: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    account: Account = Depends(get_owned_account),
    history: TransferHistoryService = Depends(get_transfer_history_service),
) -> list[TransferResponse]:
    transfers = await history.list_transfers(
        account.id,
        limit=page_size,
        offset=(page_id - 1) * page_size,
    )
    return [TransferResponse.model_validate(transfer) for transfer in transfers]
