"""
Tests for the generation orchestration and project packaging services.
"""

import io
import zipfile

from django.test import SimpleTestCase

from apps.uml_diagrams.schemas import Diagram, RelationshipType
from base.test_factories import AttributeFactory, ClassFactory, relate, user_order_diagram

from ..schemas import GeneratedFile
from ..services import CodeGeneratorService, ProjectPackagingService
from ..services.project_packaging_service import SCHEMA_PATH


class ProjectPackagingServiceTestCase(SimpleTestCase):

    def setUp(self):
        self.service = ProjectPackagingService()
        self.files = [
            GeneratedFile(
                file_name='Order.java',
                content='package a.entity;\n\npublic class Order {\n}\n',
                layer='entity',
                relative_path='src/main/java/a/entity/Order.java',
            ),
            GeneratedFile(
                file_name='OrderRepository.java',
                content='package a.repository;\n',
                layer='repository',
                relative_path='src/main/java/a/repository/OrderRepository.java',
            ),
        ]

    def test_archive_entries(self):
        archive = self.service.create_project_archive(self.files, 'CREATE TABLE a;\n')

        with zipfile.ZipFile(io.BytesIO(archive)) as zip_file:
            self.assertEqual(zip_file.namelist(), [
                'src/main/java/a/entity/Order.java',
                'src/main/java/a/repository/OrderRepository.java',
                SCHEMA_PATH,
            ])
            self.assertEqual(zip_file.read(SCHEMA_PATH).decode('utf-8'), 'CREATE TABLE a;\n')
            self.assertEqual(
                zip_file.read('src/main/java/a/entity/Order.java').decode('utf-8'),
                self.files[0].content
            )

    def test_archive_without_schema(self):
        archive = self.service.create_project_archive(self.files)

        with zipfile.ZipFile(io.BytesIO(archive)) as zip_file:
            self.assertNotIn(SCHEMA_PATH, zip_file.namelist())

    def test_archive_is_reproducible(self):
        self.assertEqual(
            self.service.create_project_archive(self.files, 'x'),
            self.service.create_project_archive(self.files, 'x')
        )

    def test_statistics(self):
        statistics = self.service.get_project_statistics(self.files)

        self.assertEqual(statistics, {
            'files_generated': 2,
            'total_lines': 5 + 2,
            'file_breakdown': {'entity': 1, 'repository': 1},
        })


class CodeGeneratorServiceTestCase(SimpleTestCase):

    def setUp(self):
        self.service = CodeGeneratorService()
        classes, relationships = user_order_diagram()
        self.diagram = Diagram(classes=tuple(classes), relationships=tuple(relationships))

    def test_springboot_files(self):
        files = self.service.generate_springboot_files(self.diagram, 'com.shop')

        self.assertEqual(len(files), 8)
        self.assertEqual(files[0].relative_path, 'src/main/java/com/shop/entity/User.java')

    def test_sql_schema(self):
        sql = self.service.generate_sql_schema(self.diagram)

        self.assertIn('CREATE TABLE order (', sql)

    def test_project_archive_contains_sources_and_schema(self):
        archive = self.service.generate_project_archive(self.diagram, 'com.shop')

        with zipfile.ZipFile(io.BytesIO(archive)) as zip_file:
            names = zip_file.namelist()
            schema = zip_file.read(SCHEMA_PATH).decode('utf-8')

        self.assertEqual(len(names), 9)
        self.assertIn('src/main/java/com/shop/controller/OrderController.java', names)
        self.assertEqual(schema, self.service.generate_sql_schema(self.diagram))

    def test_no_warnings_for_clean_diagram(self):
        self.assertEqual(self.service.collect_warnings(self.diagram), [])

    def test_warnings(self):
        order = ClassFactory(
            id='order',
            name='Order',
            attributes=[AttributeFactory(name='totalPrice'), AttributeFactory(name='total_price')]
        )
        clash = ClassFactory(id='clash', name='order')
        dangling = relate(order, ClassFactory(id='ghost'), RelationshipType.COMPOSITION.value, id='r-ghost')
        diagram = Diagram(classes=(order, clash), relationships=(dangling,))

        with self.assertLogs('apps.code_generation.services.code_generator_service', level='WARNING'):
            warnings = self.service.collect_warnings(diagram)

        self.assertEqual(warnings, [
            "Classes Order, order share the table name 'order'",
            "Attributes totalPrice, total_price of Order share the column name 'total_price'",
            "Relationship r-ghost references unknown class ghost and was skipped",
        ])

    def test_table_collision_is_warned_once_per_sql_request(self):
        diagram = Diagram(classes=(ClassFactory(name='OrderItem'), ClassFactory(name='order_item')))

        with self.assertLogs('apps.code_generation', level='WARNING') as logs:
            warnings = self.service.collect_warnings(diagram)
            self.service.generate_sql_schema(diagram)

        self.assertEqual(warnings, ["Classes OrderItem, order_item share the table name 'order_item'"])
        self.assertEqual(len(logs.records), 1)
