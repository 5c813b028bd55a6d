"""Account ledger backend: account deletion and token crediting API"""
