"""
Tests for identifier conversions and UML type lookups.
"""

from django.test import SimpleTestCase

from ..services.naming import find_snake_case_collisions, to_camel_case, to_snake_case
from ..services.type_mapping import DEFAULT_SQL_TYPE, map_uml_type_to_java, map_uml_type_to_sql


class NamingTestCase(SimpleTestCase):

    def test_to_snake_case(self):
        cases = {
            'OrderItem': 'order_item',
            'Order': 'order',
            'id': 'id',
            'firstName': 'first_name',
            'HTTPRequest': 'h_t_t_p_request',
            'already_snake': 'already_snake',
            '': '',
        }
        for name, expected in cases.items():
            with self.subTest(name=name):
                self.assertEqual(to_snake_case(name), expected)

    def test_to_snake_case_keeps_leading_underscore_of_lowercase_input(self):
        self.assertEqual(to_snake_case('_internal'), '_internal')

    def test_to_camel_case(self):
        self.assertEqual(to_camel_case('Order'), 'order')
        self.assertEqual(to_camel_case('OrderItem'), 'orderItem')
        self.assertEqual(to_camel_case('order'), 'order')
        self.assertEqual(to_camel_case(''), '')

    def test_collisions_group_distinct_names(self):
        collisions = find_snake_case_collisions(['OrderItem', 'order_item', 'Order', 'OrderItem'])

        self.assertEqual(collisions, {'order_item': ['OrderItem', 'order_item']})

    def test_no_collisions(self):
        self.assertEqual(find_snake_case_collisions(['User', 'Order']), {})


class TypeMappingTestCase(SimpleTestCase):

    def test_java_types(self):
        cases = {
            'string': 'String',
            'int': 'Integer',
            'long': 'Long',
            'boolean': 'Boolean',
            'Date': 'java.time.LocalDateTime',
            'LocalDate': 'java.time.LocalDate',
            'BigDecimal': 'java.math.BigDecimal',
        }
        for uml_type, expected in cases.items():
            with self.subTest(uml_type=uml_type):
                self.assertEqual(map_uml_type_to_java(uml_type), expected)

    def test_unknown_java_type_passes_through(self):
        self.assertEqual(map_uml_type_to_java('Money'), 'Money')
        self.assertEqual(map_uml_type_to_java('STRING'), 'STRING')

    def test_sql_types(self):
        cases = {
            'String': 'VARCHAR(255)',
            'Integer': 'INT',
            'Long': 'BIGINT',
            'Double': 'DOUBLE',
            'Float': 'FLOAT',
            'Boolean': 'BOOLEAN',
            'DateTime': 'DATETIME',
            'LocalDate': 'DATE',
            'BigDecimal': 'DECIMAL(19,2)',
        }
        for uml_type, expected in cases.items():
            with self.subTest(uml_type=uml_type):
                self.assertEqual(map_uml_type_to_sql(uml_type), expected)

    def test_unknown_sql_type_falls_back(self):
        self.assertEqual(map_uml_type_to_sql('Money'), DEFAULT_SQL_TYPE)
        self.assertEqual(map_uml_type_to_sql('List<String>'), 'VARCHAR(255)')
