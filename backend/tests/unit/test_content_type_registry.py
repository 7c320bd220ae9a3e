"""Unit tests for the YAML-backed content type registry."""

import pytest

from cms.application.services import ContentTypeRegistry
from cms.domain.entities import ContentType, FieldType
from cms.domain.exceptions import NotFoundError


def test_bundled_definitions_load(registry: ContentTypeRegistry):
    assert {"projects", "testimonials", "team", "site-content"} <= {
        ct.content_type_id for ct in registry.all()
    }

    team = registry.get("team")
    assert team.title_field == "name"
    assert team.required_fields == ["name", "role"]

    site_content = registry.get("site-content")
    assert site_content.singleton is True
    assert site_content.default_title == "Homepage Content"
    assert "heroTitle" in site_content.defaults


def test_unknown_type_raises_not_found(registry: ContentTypeRegistry):
    assert "blog" not in registry
    with pytest.raises(NotFoundError):
        registry.get("blog")


def test_default_payload_is_a_copy(registry: ContentTypeRegistry):
    site_content = registry.get("site-content")
    payload = site_content.default_payload()
    payload["stats"].clear()
    assert site_content.defaults["stats"]


def test_from_yaml_parses_fields(tmp_path):
    path = tmp_path / "types.yaml"
    path.write_text(
        """
content_types:
  - content_type_id: faq
    name: FAQ
    title_field: question
    fields:
      - { name: question, required: true }
      - { name: category, type: select, options: [billing, shipping] }
""",
        encoding="utf-8",
    )

    registry = ContentTypeRegistry.from_yaml(path)
    faq = registry.get("faq")

    assert len(registry) == 1
    assert faq.fields[0].type == FieldType.TEXT
    assert faq.fields[1].options == ("billing", "shipping")
    assert faq.default_title == "Untitled"


def test_unknown_field_type_is_rejected(tmp_path):
    path = tmp_path / "types.yaml"
    path.write_text(
        "content_types:\n  - content_type_id: faq\n    fields:\n      - { name: q, type: markdown }\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="unknown type 'markdown'"):
        ContentTypeRegistry.from_yaml(path)


def test_duplicate_type_ids_are_rejected():
    with pytest.raises(ValueError):
        ContentTypeRegistry(
            [ContentType(content_type_id="faq", name="A"), ContentType(content_type_id="faq", name="B")]
        )
