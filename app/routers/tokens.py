"""Token crediting endpoint"""

from fastapi import APIRouter, Depends

from app.routers.dependencies import get_principal, get_services, reject_method
from app.schemas import ERROR_RESPONSES, AddTokensRequest, MessageResponse
from app.services.context import ServiceContext
from app.services.firebase import Principal
from app.utils.constants import ADD_TOKENS_SUCCESS, REJECTED_METHODS

router = APIRouter(tags=["Tokens"])


@router.post("/addTokens", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def add_tokens(
    payload: AddTokensRequest | None = None,
    principal: Principal = Depends(get_principal),
    services: ServiceContext = Depends(get_services),
):
    """
    Credit premium tokens to the caller's own account.

    The increment runs in a store transaction; the new balance is not
    returned.
    """
    payload = payload or AddTokensRequest()
    await services.token_ledger.add_tokens(principal, payload.user_id, payload.tokens)
    return MessageResponse(message=ADD_TOKENS_SUCCESS)


router.add_api_route(
    "/addTokens",
    reject_method,
    methods=REJECTED_METHODS,
    include_in_schema=False,
)
