"""Employee record SQL query constants (parameterized by schema)."""

EMPLOYEE_COLUMNS = """
    id, company_id, name, department, hire_date, linked_identity_id,
    created_at, updated_at
"""

EMPLOYEE_INSERT = """
    INSERT INTO {schema}.employees (
        id, company_id, name, department, hire_date, linked_identity_id,
        created_at, updated_at
    ) VALUES (
        $1, $2, $3, $4, $5, $6, $7, $8
    ) RETURNING """ + EMPLOYEE_COLUMNS

EMPLOYEE_GET_BY_ID = """
    SELECT """ + EMPLOYEE_COLUMNS + """
    FROM {schema}.employees
    WHERE id = $1
"""

EMPLOYEE_GET_BY_LINKED_IDENTITY = """
    SELECT """ + EMPLOYEE_COLUMNS + """
    FROM {schema}.employees
    WHERE company_id = $1 AND linked_identity_id = $2
"""

EMPLOYEE_LIST_UNLINKED = """
    SELECT """ + EMPLOYEE_COLUMNS + """
    FROM {schema}.employees
    WHERE company_id = $1 AND linked_identity_id IS NULL
    ORDER BY name ASC
"""

# {assignments} is built from a fixed column whitelist, never from input
EMPLOYEE_UPDATE = """
    UPDATE {schema}.employees SET
        {assignments},
        updated_at = NOW()
    WHERE id = $1
    RETURNING """ + EMPLOYEE_COLUMNS

EMPLOYEE_LINK_IDENTITY = """
    UPDATE {schema}.employees SET
        linked_identity_id = $2,
        updated_at = NOW()
    WHERE id = $1 AND linked_identity_id IS NULL
    RETURNING id
"""

EMPLOYEE_UNLINK_IDENTITY = """
    UPDATE {schema}.employees SET
        linked_identity_id = NULL,
        updated_at = NOW()
    WHERE company_id = $1 AND linked_identity_id = $2
"""
