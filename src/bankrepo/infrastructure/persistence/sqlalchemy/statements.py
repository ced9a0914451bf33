"""Parameterized statements issued by the bank repository.

Lookups, creation and status changes go through store-side functions and
procedures (see ``schema``); only the listing reads the table directly.
"""

from sqlalchemy import text

LIST_BANKS = text("SELECT id, name, acronym, status FROM banks")

GET_BANK = text("SELECT id, name, acronym, status FROM get_bank(:id)")

CREATE_BANK = text("SELECT id FROM create_bank(:acronym, :name)")

CHANGE_BANK_STATUS = text("CALL change_bank_status(:id, :status)")
