"""Funds transfer endpoint."""
from fastapi import APIRouter, Depends, status

from bank.interfaces.http.deps import get_current_username, get_transfer_service
from bank.interfaces.http.errors import transfer_error_to_http
from bank.modules.transfers import TransferError
from bank.modules.transfers.models import TransferRequest
from bank.modules.transfers.service import TransferService
from bank.schemas import TransferCreate, TransferResultResponse

router = APIRouter()


@router.post(
    "",
    response_model=TransferResultResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Move money between two accounts",
)
async def create_transfer(
    payload: TransferCreate,
    username: str = Depends(get_current_username),
    service: TransferService = Depends(get_transfer_service),
) -> TransferResultResponse:
    try:
        result = await service.transfer(
            TransferRequest(
                username=username,
                from_account_id=payload.from_account_id,
                to_account_id=payload.to_account_id,
                amount=payload.amount,
            )
        )
    except TransferError as exc:
        raise transfer_error_to_http(exc) from exc
    return TransferResultResponse.model_validate(result)
