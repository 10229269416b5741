"""
Tests for SpringBoot code generators - Entity, Repository, Service, Controller.
"""

from django.test import SimpleTestCase

from apps.uml_diagrams.schemas import Diagram, RelationshipType
from base.test_factories import (
    AttributeFactory,
    ClassFactory,
    InterfaceFactory,
    relate,
    student_course_diagram,
    user_order_diagram,
)

from ..services.springboot_code_generator import DEFAULT_PACKAGE_NAME, SpringBootCodeGenerator
from ..services.springboot_controller_generator import SpringBootControllerGenerator, resource_path
from ..services.springboot_entity_generator import SpringBootEntityGenerator
from ..services.springboot_repository_generator import SpringBootRepositoryGenerator
from ..services.springboot_service_generator import SpringBootServiceGenerator
from ..services.template_rendering_service import TemplateRenderingService

PACKAGE = 'com.acme.shop'


def entity_for(uml_class, classes, relationships=()):
    diagram = Diagram(classes=tuple(classes), relationships=tuple(relationships))
    return SpringBootEntityGenerator().generate_entity(uml_class, diagram, PACKAGE)


class SpringBootEntityGeneratorTestCase(SimpleTestCase):
    """Test cases for SpringBootEntityGenerator."""

    def setUp(self):
        self.customer = ClassFactory(
            id='customer',
            name='Customer',
            attributes=[
                AttributeFactory(name='id', type='Long'),
                AttributeFactory(name='firstName', type='String'),
                AttributeFactory(name='birthDate', type='LocalDate'),
                AttributeFactory(name='balance', type='Money'),
            ]
        )

    def test_file_metadata(self):
        generated = entity_for(self.customer, [self.customer])

        self.assertEqual(generated.file_name, 'Customer.java')
        self.assertEqual(generated.layer, 'entity')
        self.assertEqual(generated.relative_path, 'src/main/java/com/acme/shop/entity/Customer.java')

    def test_class_header(self):
        content = entity_for(self.customer, [self.customer]).content

        self.assertTrue(content.startswith('package com.acme.shop.entity;\n\n'))
        self.assertIn('import jakarta.persistence.*;', content)
        self.assertIn('import lombok.Data;', content)
        self.assertIn(
            '@Entity\n@Table(name = "customer")\n@Data\n@NoArgsConstructor\n@AllArgsConstructor\n'
            'public class Customer {',
            content
        )
        self.assertNotIn('java.util.List', content)

    def test_surrogate_key_replaces_declared_id(self):
        content = entity_for(self.customer, [self.customer]).content

        self.assertIn(
            '    @Id\n'
            '    @GeneratedValue(strategy = GenerationType.IDENTITY)\n'
            '    private Long id;\n',
            content
        )
        self.assertEqual(content.count('private Long id;'), 1)
        self.assertNotIn('@Column(name = "id")', content)

    def test_attribute_columns(self):
        content = entity_for(self.customer, [self.customer]).content

        self.assertIn('    @Column(name = "first_name")\n    private String firstName;\n', content)
        self.assertIn('    @Column(name = "birth_date")\n    private java.time.LocalDate birthDate;\n', content)
        self.assertIn('    @Column(name = "balance")\n    private Money balance;\n', content)

    def test_composition_to_many_is_collection(self):
        order = ClassFactory(id='order', name='Order')
        rel = relate(self.customer, order, RelationshipType.COMPOSITION.value, target_multiplicity='1..*')

        content = entity_for(self.customer, [self.customer, order], [rel]).content

        self.assertIn(
            '    @OneToMany(mappedBy = "customer", cascade = CascadeType.ALL, fetch = FetchType.LAZY)\n'
            '    private List<Order> orderList = new ArrayList<>();\n',
            content
        )
        self.assertIn('import java.util.List;\nimport java.util.ArrayList;\n', content)

    def test_composition_to_one_is_scalar_with_join_column(self):
        profile = ClassFactory(id='profile', name='LoyaltyProfile')
        rel = relate(self.customer, profile, RelationshipType.COMPOSITION.value, target_multiplicity='0..1')

        content = entity_for(self.customer, [self.customer, profile], [rel]).content

        self.assertIn(
            '    @OneToOne(cascade = CascadeType.ALL)\n'
            '    @JoinColumn(name = "loyalty_profile_id")\n'
            '    private LoyaltyProfile loyaltyProfile;\n',
            content
        )
        self.assertNotIn('java.util.List', content)

    def test_composition_part_side_has_no_join_column(self):
        wallet = ClassFactory(id='wallet', name='Wallet')
        rel = relate(self.customer, wallet, RelationshipType.COMPOSITION.value, target_multiplicity='1..*')

        content = entity_for(wallet, [self.customer, wallet], [rel]).content

        self.assertNotIn('@JoinColumn', content)
        self.assertNotIn('@OneToOne', content)
        self.assertIn('@OneToMany(mappedBy = "wallet"', content)
        self.assertIn('private List<Customer> customerList = new ArrayList<>();', content)

    def test_aggregation_seen_from_target_uses_target_multiplicity(self):
        team = ClassFactory(id='team', name='Team')
        rel = relate(team, self.customer, RelationshipType.AGGREGATION.value,
                     source_multiplicity='*', target_multiplicity='1..1')

        content = entity_for(self.customer, [team, self.customer], [rel]).content

        self.assertIn(
            '    @OneToOne(cascade = CascadeType.ALL)\n'
            '    @JoinColumn(name = "team_id")\n'
            '    private Team team;\n',
            content
        )
        self.assertNotIn('java.util.List', content)

    def test_association_to_many_is_many_to_many(self):
        tag = ClassFactory(id='tag', name='Tag')
        rel = relate(self.customer, tag, RelationshipType.ASSOCIATION.value, target_multiplicity='*')

        content = entity_for(self.customer, [self.customer, tag], [rel]).content

        self.assertIn(
            '    @ManyToMany\n'
            '    @JoinTable(\n'
            '        name = "customer_tag",\n'
            '        joinColumns = @JoinColumn(name = "customer_id"),\n'
            '        inverseJoinColumns = @JoinColumn(name = "tag_id")\n'
            '    )\n'
            '    private List<Tag> tagList = new ArrayList<>();\n',
            content
        )

    def test_association_to_one_is_many_to_one(self):
        classes, relationships = user_order_diagram()
        user, order = classes

        content = entity_for(order, classes, relationships).content

        self.assertIn(
            '    @ManyToOne\n'
            '    @JoinColumn(name = "user_id")\n'
            '    private User user;\n',
            content
        )

    def test_ignored_relationship_types(self):
        base = ClassFactory(id='base', name='Party')
        auditable = InterfaceFactory(id='auditable', name='Auditable')
        relationships = [
            relate(self.customer, base, RelationshipType.INHERITANCE.value),
            relate(self.customer, auditable, RelationshipType.REALIZATION.value),
            relate(self.customer, base, RelationshipType.DEPENDENCY.value, target_multiplicity='*'),
        ]

        content = entity_for(self.customer, [self.customer, base, auditable], relationships).content
        plain = entity_for(self.customer, [self.customer]).content

        self.assertEqual(content, plain)

    def test_dangling_relationship_is_skipped(self):
        rel = relate(self.customer, ClassFactory(id='ghost'), RelationshipType.COMPOSITION.value)

        content = entity_for(self.customer, [self.customer], [rel]).content

        self.assertEqual(content, entity_for(self.customer, [self.customer]).content)

    def test_duplicate_relationships_produce_duplicate_fields(self):
        order = ClassFactory(id='order', name='Order')
        relationships = [
            relate(self.customer, order, RelationshipType.ASSOCIATION.value),
            relate(self.customer, order, RelationshipType.ASSOCIATION.value),
        ]

        content = entity_for(self.customer, [self.customer, order], relationships).content

        self.assertEqual(content.count('private Order order;'), 2)


class SpringBootRepositoryGeneratorTestCase(SimpleTestCase):

    def test_generate_repository(self):
        generated = SpringBootRepositoryGenerator().generate_repository(ClassFactory(name='Order'), PACKAGE)

        self.assertEqual(generated.file_name, 'OrderRepository.java')
        self.assertEqual(generated.layer, 'repository')
        self.assertEqual(generated.relative_path, 'src/main/java/com/acme/shop/repository/OrderRepository.java')
        self.assertIn('package com.acme.shop.repository;', generated.content)
        self.assertIn('import com.acme.shop.entity.Order;', generated.content)
        self.assertIn(
            '@Repository\npublic interface OrderRepository extends JpaRepository<Order, Long> {',
            generated.content
        )


class SpringBootServiceGeneratorTestCase(SimpleTestCase):

    def setUp(self):
        self.generated = SpringBootServiceGenerator().generate_service(ClassFactory(name='Order'), PACKAGE)
        self.content = self.generated.content

    def test_file_metadata(self):
        self.assertEqual(self.generated.file_name, 'OrderService.java')
        self.assertEqual(self.generated.layer, 'service')
        self.assertEqual(self.generated.relative_path, 'src/main/java/com/acme/shop/service/OrderService.java')

    def test_repository_injection(self):
        self.assertIn('@Service\npublic class OrderService {', self.content)
        self.assertIn('    @Autowired\n    private OrderRepository orderRepository;\n', self.content)

    def test_crud_methods(self):
        self.assertIn('    public List<Order> findAll() {\n        return orderRepository.findAll();\n    }', self.content)
        self.assertIn('    public Optional<Order> findById(Long id) {', self.content)
        self.assertIn('    public Order save(Order order) {\n        return orderRepository.save(order);', self.content)
        self.assertIn('    public void deleteById(Long id) {\n        orderRepository.deleteById(id);', self.content)

    def test_update_signals_missing_entity(self):
        self.assertIn('import jakarta.persistence.EntityNotFoundException;', self.content)
        self.assertIn(
            '    public Order update(Long id, Order order) {\n'
            '        if (!orderRepository.existsById(id)) {\n'
            '            throw new EntityNotFoundException("Order not found with id: " + id);\n'
            '        }\n'
            '        order.setId(id);\n'
            '        return orderRepository.save(order);\n'
            '    }\n',
            self.content
        )

    def test_methods_are_separated_by_blank_line(self):
        self.assertIn('    }\n\n    public Optional<Order> findById', self.content)
        self.assertTrue(self.content.endswith('    }\n}\n'))


class SpringBootControllerGeneratorTestCase(SimpleTestCase):

    def setUp(self):
        self.generated = SpringBootControllerGenerator().generate_controller(
            ClassFactory(name='OrderItem'), PACKAGE
        )
        self.content = self.generated.content

    def test_resource_path(self):
        self.assertEqual(resource_path('Order'), '/api/orders')
        self.assertEqual(resource_path('OrderItem'), '/api/orderItems')

    def test_file_metadata(self):
        self.assertEqual(self.generated.file_name, 'OrderItemController.java')
        self.assertEqual(self.generated.layer, 'controller')
        self.assertEqual(
            self.generated.relative_path,
            'src/main/java/com/acme/shop/controller/OrderItemController.java'
        )

    def test_class_annotations(self):
        self.assertIn(
            '@RestController\n@RequestMapping("/api/orderItems")\n@CrossOrigin(origins = "*")\n'
            'public class OrderItemController {',
            self.content
        )
        self.assertIn('    private OrderItemService orderItemService;', self.content)

    def test_endpoints(self):
        self.assertIn('    @GetMapping\n    public ResponseEntity<List<OrderItem>> getAllOrderItems() {', self.content)
        self.assertIn(
            '    @GetMapping("/{id}")\n'
            '    public ResponseEntity<OrderItem> getOrderItemById(@PathVariable Long id) {',
            self.content
        )
        self.assertIn('.orElse(ResponseEntity.notFound().build());', self.content)
        self.assertIn(
            '    @PostMapping\n'
            '    public ResponseEntity<OrderItem> createOrderItem(@RequestBody OrderItem orderItem) {',
            self.content
        )
        self.assertIn(
            '    @DeleteMapping("/{id}")\n'
            '    public ResponseEntity<Void> deleteOrderItem(@PathVariable Long id) {',
            self.content
        )
        self.assertIn('return ResponseEntity.noContent().build();', self.content)

    def test_update_maps_not_found_to_404(self):
        self.assertIn(
            '    @PutMapping("/{id}")\n'
            '    public ResponseEntity<OrderItem> updateOrderItem(@PathVariable Long id, '
            '@RequestBody OrderItem orderItem) {\n'
            '        try {\n'
            '            OrderItem updatedOrderItem = orderItemService.update(id, orderItem);\n'
            '            return ResponseEntity.ok(updatedOrderItem);\n'
            '        } catch (EntityNotFoundException e) {\n'
            '            return ResponseEntity.notFound().build();\n'
            '        }\n'
            '    }\n',
            self.content
        )


class SpringBootCodeGeneratorTestCase(SimpleTestCase):

    def test_four_files_per_concrete_class_in_input_order(self):
        classes = [ClassFactory(name='Alpha'), InterfaceFactory(name='Named'), ClassFactory(name='Beta')]

        generated = SpringBootCodeGenerator(classes, [], PACKAGE).generate_all()

        self.assertEqual([f.file_name for f in generated], [
            'Alpha.java', 'AlphaRepository.java', 'AlphaService.java', 'AlphaController.java',
            'Beta.java', 'BetaRepository.java', 'BetaService.java', 'BetaController.java',
        ])
        self.assertEqual(
            [f.layer for f in generated[:4]],
            ['entity', 'repository', 'service', 'controller']
        )

    def test_interfaces_produce_nothing(self):
        generated = SpringBootCodeGenerator([InterfaceFactory(name='Named')], []).generate_all()

        self.assertEqual(generated, [])

    def test_default_package(self):
        generated = SpringBootCodeGenerator([ClassFactory(name='Alpha')], []).generate_all()

        self.assertEqual(DEFAULT_PACKAGE_NAME, 'com.example.demo')
        self.assertIn('package com.example.demo.entity;', generated[0].content)

    def test_repeated_generation_is_identical(self):
        classes, relationships = student_course_diagram()
        generator = SpringBootCodeGenerator(classes, relationships, PACKAGE)

        self.assertEqual(generator.generate_all(), generator.generate_all())

    def test_input_list_changes_do_not_leak_into_generator(self):
        classes, relationships = user_order_diagram()
        generator = SpringBootCodeGenerator(classes, relationships, PACKAGE)
        before = generator.generate_all()

        classes.append(ClassFactory(name='Invoice'))
        relationships.clear()

        self.assertEqual(generator.generate_all(), before)


class TemplateRenderingServiceTestCase(SimpleTestCase):

    def test_unknown_template(self):
        with self.assertRaises(ValueError):
            TemplateRenderingService()._render_template('missing.java.j2', {})
