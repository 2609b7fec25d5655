"""Company SQL query constants (parameterized by schema)."""

COMPANY_INSERT = """
    INSERT INTO {schema}.companies (id, name, business_number, created_at)
    VALUES ($1, $2, $3, $4)
    RETURNING id, name, business_number, created_at
"""

COMPANY_GET_BY_ID = """
    SELECT id, name, business_number, created_at
    FROM {schema}.companies
    WHERE id = $1
"""
