"""Application-wide constants."""

# HTTP
WRITE_METHOD = "POST"
# Methods answered with 405 on write endpoints, after authentication
REJECTED_METHODS = ["GET", "PUT", "PATCH", "DELETE"]

# Document store collections
HASH_COLLECTION = "hash"
USERS_COLLECTION = "users"

# Field path of the premium balance inside a user record
PREMIUM_TOKEN_FIELD = "tokens.premiumToken"

# Error messages returned to clients
MISSING_AUTH_HEADER = "Missing Authorization header"
INVALID_TOKEN = "Invalid or expired token"
METHOD_NOT_ALLOWED = "Method not allowed"
INVALID_REQUEST_BODY = "Invalid request body"
EMAIL_REQUIRED = "Email is required"
MISSING_USER_OR_TOKENS = "Missing userId or tokens"
NEGATIVE_TOKENS = "Tokens must be a positive integer"
USER_NOT_FOUND = "User not found"
DELETE_FORBIDDEN = "Unauthorized: Can only delete your own account"
ADD_TOKENS_FORBIDDEN = "Unauthorized: Can only add tokens for your own account"
RESTORE_FORBIDDEN = "Unauthorized: Can only restore your own account"

# Success messages
DELETE_SUCCESS = "User data successfully processed"
ADD_TOKENS_SUCCESS = "Tokens added"
