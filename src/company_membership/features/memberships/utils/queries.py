"""Membership SQL query constants (parameterized by schema)."""

MEMBERSHIP_COLUMNS = """
    id, identity_id, company_id, role, permission, status,
    applied_at, approved_at, email, display_name
"""

MEMBERSHIP_INSERT = """
    INSERT INTO {schema}.company_memberships (
        id, identity_id, company_id, role, permission, status,
        applied_at, approved_at, email, display_name
    ) VALUES (
        $1, $2, $3, $4, $5, $6, $7, $8, $9, $10
    ) RETURNING """ + MEMBERSHIP_COLUMNS

MEMBERSHIP_UPDATE = """
    UPDATE {schema}.company_memberships SET
        role = $2,
        permission = $3,
        status = $4,
        approved_at = $5,
        display_name = $6
    WHERE id = $1
    RETURNING """ + MEMBERSHIP_COLUMNS

MEMBERSHIP_GET_BY_ID = """
    SELECT """ + MEMBERSHIP_COLUMNS + """
    FROM {schema}.company_memberships
    WHERE id = $1
"""

MEMBERSHIP_GET_OPEN = """
    SELECT """ + MEMBERSHIP_COLUMNS + """
    FROM {schema}.company_memberships
    WHERE identity_id = $1 AND company_id = $2 AND status <> 'removed'
"""

MEMBERSHIP_GET_ACTIVE_BY_IDENTITY = """
    SELECT """ + MEMBERSHIP_COLUMNS + """
    FROM {schema}.company_memberships
    WHERE identity_id = $1 AND status = 'active'
"""

MEMBERSHIP_LIST_BY_STATUS = """
    SELECT """ + MEMBERSHIP_COLUMNS + """
    FROM {schema}.company_memberships
    WHERE company_id = $1 AND status = $2
    ORDER BY applied_at ASC
"""

MEMBERSHIP_COUNT_BY_STATUS = """
    SELECT COUNT(*)
    FROM {schema}.company_memberships
    WHERE company_id = $1 AND status = $2
"""
