"""Token balance updates"""

from app.services.tokens.token_ledger import TokenLedger

__all__ = ["TokenLedger"]
