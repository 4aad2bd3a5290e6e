"""Bounds and defaults shared by the validator, generator and preference code.

Every range check in the calculator reads its limits from here so the form,
the command line and the stored rate agree on what a valid value is.
"""

# Loan amount accepted by the form (inclusive)
MIN_LOAN_AMOUNT = 1
MAX_LOAN_AMOUNT = 1_000_000

# Loan term in months (inclusive); also the ceiling of the display horizon
MIN_TERM_MONTHS = 1
MAX_TERM_MONTHS = 360

# Monthly interest rate in percent (inclusive)
MIN_MONTHLY_RATE = 0.1
MAX_MONTHLY_RATE = 100

# Rate used until a saved preference is loaded, or when loading fails
DEFAULT_MONTHLY_RATE = 10.0

# Term shown when the form opens
DEFAULT_TERM_MONTHS = 1

# The display horizon is rounded up to a whole number of these
MONTHS_PER_YEAR = 12

# Preference store key holding the last saved monthly rate
CUSTOM_INTEREST_RATE_KEY = "customInterestRate"

CURRENCY_SYMBOL = "₱"
