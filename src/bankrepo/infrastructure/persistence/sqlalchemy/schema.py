"""PostgreSQL schema for the bank store.

The table plus the functions and procedure the repository calls. Every
statement is idempotent so the schema can be applied on each startup.
"""

CREATE_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS banks (
        id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
        name VARCHAR(255) NOT NULL,
        acronym VARCHAR(50) NOT NULL,
        status INTEGER NOT NULL DEFAULT 0,
        CONSTRAINT uq_banks_acronym UNIQUE (acronym)
    )
    """,
    """
    CREATE OR REPLACE FUNCTION get_bank(p_id UUID)
    RETURNS TABLE (id UUID, name VARCHAR, acronym VARCHAR, status INTEGER)
    LANGUAGE sql STABLE
    AS $$
        SELECT b.id, b.name, b.acronym, b.status FROM banks b WHERE b.id = p_id
    $$
    """,
    """
    CREATE OR REPLACE FUNCTION create_bank(p_acronym VARCHAR, p_name VARCHAR)
    RETURNS TABLE (id UUID)
    LANGUAGE sql
    AS $$
        INSERT INTO banks (acronym, name) VALUES (p_acronym, p_name)
        RETURNING banks.id
    $$
    """,
    """
    CREATE OR REPLACE PROCEDURE change_bank_status(p_id UUID, p_status INTEGER)
    LANGUAGE sql
    AS $$
        UPDATE banks SET status = p_status WHERE id = p_id
    $$
    """,
)

DROP_STATEMENTS: tuple[str, ...] = (
    "DROP PROCEDURE IF EXISTS change_bank_status(UUID, INTEGER)",
    "DROP FUNCTION IF EXISTS create_bank(VARCHAR, VARCHAR)",
    "DROP FUNCTION IF EXISTS get_bank(UUID)",
    "DROP TABLE IF EXISTS banks",
)
