"""
Template Rendering Service for SpringBoot code generation using Jinja2 templates.
"""

from typing import Any, Dict

from jinja2 import DictLoader, Environment, TemplateNotFound

from .naming import to_camel_case, to_snake_case


ENTITY_TEMPLATE = '''package {{ package_name }}.entity;

{% for import in imports %}
import {{ import }};
{% endfor %}

{% for annotation in class_annotations %}
{{ annotation }}
{% endfor %}
public class {{ class_name }} {

    @Id
    @GeneratedValue(strategy = GenerationType.IDENTITY)
    private {{ id_type }} id;

{% for field in fields %}
{% for annotation in field.annotations %}
    {{ annotation }}
{% endfor %}
    private {{ field.declaration }};

{% endfor %}
}
'''

REPOSITORY_TEMPLATE = '''package {{ package_name }}.repository;

import org.springframework.data.jpa.repository.JpaRepository;
import org.springframework.stereotype.Repository;
import {{ package_name }}.entity.{{ entity_name }};

@Repository
public interface {{ repository_name }} extends JpaRepository<{{ entity_name }}, {{ id_type }}> {

    // Custom query methods can be added here
    // Example: List<{{ entity_name }}> findByName(String name);

}
'''

SERVICE_TEMPLATE = '''package {{ package_name }}.service;

{% for import in imports %}
import {{ import }};
{% endfor %}

@Service
public class {{ service_name }} {

    @Autowired
    private {{ repository_name }} {{ repository_name | camel_case }};

{% for method in crud_methods %}
    public {{ method.return_type }} {{ method.name }}({{ method.parameters | join(', ') }}) {
{% for line in method.body %}
        {{ line }}
{% endfor %}
    }
{% if not loop.last %}

{% endif %}
{% endfor %}
}
'''

CONTROLLER_TEMPLATE = '''package {{ package_name }}.controller;

{% for import in imports %}
import {{ import }};
{% endfor %}

{% for annotation in class_annotations %}
{{ annotation }}
{% endfor %}
public class {{ controller_name }} {

    @Autowired
    private {{ service_name }} {{ service_name | camel_case }};

{% for endpoint in crud_endpoints %}
    {{ endpoint.annotation }}
    public {{ endpoint.return_type }} {{ endpoint.name }}({{ endpoint.parameters | join(', ') }}) {
{% for line in endpoint.body %}
        {{ line }}
{% endfor %}
    }
{% if not loop.last %}

{% endif %}
{% endfor %}
}
'''

TEMPLATES = {
    'entity.java.j2': ENTITY_TEMPLATE,
    'repository.java.j2': REPOSITORY_TEMPLATE,
    'service.java.j2': SERVICE_TEMPLATE,
    'controller.java.j2': CONTROLLER_TEMPLATE,
}


class TemplateRenderingService:
    """
    Service for rendering SpringBoot code templates using Jinja2.
    """

    def __init__(self):
        self.jinja_env = self._create_jinja_environment()

    def _create_jinja_environment(self) -> Environment:
        """Create and configure Jinja2 environment."""
        env = Environment(
            loader=DictLoader(TEMPLATES),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True
        )

        env.filters['camel_case'] = to_camel_case
        env.filters['snake_case'] = to_snake_case

        return env

    def render_entity_template(self, context: Dict[str, Any]) -> str:
        """Render JPA Entity template."""
        return self._render_template('entity.java.j2', context)

    def render_repository_template(self, context: Dict[str, Any]) -> str:
        """Render JPA Repository template."""
        return self._render_template('repository.java.j2', context)

    def render_service_template(self, context: Dict[str, Any]) -> str:
        """Render Service class template."""
        return self._render_template('service.java.j2', context)

    def render_controller_template(self, context: Dict[str, Any]) -> str:
        """Render REST Controller template."""
        return self._render_template('controller.java.j2', context)

    def _render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render template with given context."""
        try:
            template = self.jinja_env.get_template(template_name)
        except TemplateNotFound:
            raise ValueError(f"Template {template_name} is not registered")
        return template.render(**context)
