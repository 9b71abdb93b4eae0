"""Human-readable reason strings attached to instruction verdicts."""

MALFORMED_INSTRUCTION = "Malformed instruction: unable to parse keywords"
MISSING_KEYWORD = "Missing keyword"
INVALID_AMOUNT = "Invalid amount: amount must be a positive integer"
UNSUPPORTED_CURRENCY = "Unsupported currency: only NGN, USD, GBP and GHS are supported"
INVALID_ACCOUNT_ID = "Invalid account id"
INVALID_DATE_FORMAT = "Invalid date format: date format is YYYY-MM-DD"
INVALID_MONTH = "Invalid month, month must be between 1 and 12 in YYYY-MM-DD"
INVALID_DAY = "Invalid day, day cannot be greater than 31 in YYYY-MM-DD"
DATE_WITHOUT_ON = "Date provided without 'ON' keyword: date format is YYYY-MM-DD"
INCOMPLETE_DATE = "No date provided after 'ON' keyword: date format is YYYY-MM-DD"
ACCOUNT_NOT_FOUND = "Account not found"
CURRENCY_MISMATCH = "Currency mismatch"
SAME_ACCOUNT_ERROR = "Debit and credit accounts cannot be the same"
INSUFFICIENT_FUNDS = "Insufficient funds"
TRANSACTION_SUCCESSFUL = "Transaction executed successfully"
TRANSACTION_PENDING = "Transaction scheduled for future execution"

HTTP_DEFAULT_FAILED = "Instruction validation failed"
HTTP_DEFAULT_PENDING = "Instruction scheduled for execution"
HTTP_DEFAULT_SUCCESSFUL = "Instruction executed successfully"
