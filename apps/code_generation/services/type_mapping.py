"""
UML type name lookups for Java fields and SQL columns.

Keys are case-sensitive. Unknown UML types pass through unchanged for Java
and fall back to ``VARCHAR(255)`` for SQL.
"""

JAVA_TYPE_MAPPING = {
    'String': 'String',
    'string': 'String',
    'Integer': 'Integer',
    'int': 'Integer',
    'Long': 'Long',
    'long': 'Long',
    'Double': 'Double',
    'double': 'Double',
    'Float': 'Float',
    'float': 'Float',
    'Boolean': 'Boolean',
    'boolean': 'Boolean',
    'Date': 'java.time.LocalDateTime',
    'DateTime': 'java.time.LocalDateTime',
    'LocalDateTime': 'java.time.LocalDateTime',
    'LocalDate': 'java.time.LocalDate',
    'BigDecimal': 'java.math.BigDecimal',
}

SQL_TYPE_MAPPING = {
    'String': 'VARCHAR(255)',
    'string': 'VARCHAR(255)',
    'Integer': 'INT',
    'int': 'INT',
    'Long': 'BIGINT',
    'long': 'BIGINT',
    'Double': 'DOUBLE',
    'double': 'DOUBLE',
    'Float': 'FLOAT',
    'float': 'FLOAT',
    'Boolean': 'BOOLEAN',
    'boolean': 'BOOLEAN',
    'Date': 'DATETIME',
    'DateTime': 'DATETIME',
    'LocalDateTime': 'DATETIME',
    'LocalDate': 'DATE',
    'BigDecimal': 'DECIMAL(19,2)',
}

DEFAULT_SQL_TYPE = 'VARCHAR(255)'


def map_uml_type_to_java(uml_type: str) -> str:
    """Map UML data type to Java type."""
    return JAVA_TYPE_MAPPING.get(uml_type, uml_type)


def map_uml_type_to_sql(uml_type: str) -> str:
    """Map UML data type to SQL column type."""
    return SQL_TYPE_MAPPING.get(uml_type, DEFAULT_SQL_TYPE)
