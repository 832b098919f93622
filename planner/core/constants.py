"""Application constants."""

# Status codes distinguishing the two "missing row" failures
TARGET_NOT_FOUND = 416  # the row being read/updated/deleted does not exist
PARENT_NOT_FOUND = 417  # a referenced row (foreign key) does not exist

DUPLICATE_NAME = 409
