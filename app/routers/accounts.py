"""Account deletion and snapshot restore endpoints"""

from fastapi import APIRouter, Depends

from app.routers.dependencies import get_principal, get_services, reject_method
from app.schemas import (
    ERROR_RESPONSES,
    DeleteAccountRequest,
    DeleteAccountResponse,
    RestoreTokensRequest,
    RestoreTokensResponse,
)
from app.services.context import ServiceContext
from app.services.firebase import Principal
from app.utils.constants import DELETE_SUCCESS, REJECTED_METHODS

router = APIRouter(tags=["Accounts"])


@router.post(
    "/deleteAccount",
    response_model=DeleteAccountResponse,
    responses=ERROR_RESPONSES,
)
async def delete_account(
    payload: DeleteAccountRequest | None = None,
    principal: Principal = Depends(get_principal),
    services: ServiceContext = Depends(get_services),
):
    """
    Delete the caller's account, keeping their balance under a pseudonym.

    The token balance is stored in the hash collection keyed by the
    hashed email; the user record is deleted when ``uid`` is given.
    """
    payload = payload or DeleteAccountRequest()
    server_hash = await services.account_eraser.delete_account(
        principal,
        payload.email,
        tokens=payload.tokens,
        uid=payload.uid,
        client_hash=payload.client_encrypted_email,
    )
    return DeleteAccountResponse(message=DELETE_SUCCESS, server_hashed_email=server_hash)


@router.post(
    "/restoreTokens",
    response_model=RestoreTokensResponse,
    responses=ERROR_RESPONSES,
)
async def restore_tokens(
    payload: RestoreTokensRequest | None = None,
    principal: Principal = Depends(get_principal),
    services: ServiceContext = Depends(get_services),
):
    """
    Claim the balance kept from a previously deleted account.

    Returns ``restored=false`` and zero tokens when there is nothing to claim.
    """
    payload = payload or RestoreTokensRequest()
    tokens = await services.snapshot_restorer.restore(principal, payload.email)
    return RestoreTokensResponse(restored=tokens is not None, tokens=tokens or 0)


router.add_api_route(
    "/deleteAccount", reject_method, methods=REJECTED_METHODS, include_in_schema=False
)
router.add_api_route(
    "/restoreTokens", reject_method, methods=REJECTED_METHODS, include_in_schema=False
)
