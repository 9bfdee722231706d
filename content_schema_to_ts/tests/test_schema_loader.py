import json

import pytest

from content_schema_to_ts.schema import (
    DocumentDef,
    EnumListItem,
    InlineObjectFieldDef,
    ListFieldDef,
    ObjectFieldDef,
    PolymorphicListFieldDef,
    ReferenceFieldDef,
    ReferenceListItem,
    SchemaDef,
    StringFieldDef,
    StringListItem,
    UnknownFieldDef,
    UnknownListItem,
)
from content_schema_to_ts.declarations import build_document_type
from content_schema_to_ts.schema_loader import SchemaLoader, SchemaLoadError, dump_schema, load_schema


@pytest.fixture
def loader():
    return SchemaLoader()


class TestSchemaLoader:
    def test_parse_document_and_object(self, loader):
        schema = loader.parse(
            {
                "documentDefMap": {
                    "Post": {
                        "name": "Post",
                        "label": "Blog post",
                        "description": "A post",
                        "fieldDefs": [
                            {"type": "string", "name": "title", "required": True},
                            {"type": "reference", "name": "author", "documentName": "Author"},
                            {"type": "object", "name": "seo", "objectName": "SEO"},
                        ],
                        "computedFields": [{"name": "slug", "type": "string", "description": "URL slug"}],
                    }
                },
                "objectDefMap": {"SEO": {"name": "SEO", "fieldDefs": []}},
            }
        )

        post = schema.document_def_map["Post"]
        assert post.label == "Blog post"
        assert post.description == "A post"
        assert post.field_defs[0] == StringFieldDef(name="title", required=True)
        assert post.field_defs[1] == ReferenceFieldDef(name="author", document_name="Author")
        assert post.field_defs[2] == ObjectFieldDef(name="seo", object_name="SEO")
        assert post.computed_fields[0].type == "string"

        seo = schema.object_def_map["SEO"]
        assert seo.label == ""
        assert seo.field_defs == []

    def test_missing_name_uses_map_key(self, loader):
        schema = loader.parse({"documentDefMap": {"Page": {"fieldDefs": []}}})
        assert schema.document_def_map["Page"].name == "Page"
        assert schema.object_def_map == {}

    def test_lists_and_nesting(self, loader):
        schema = loader.parse(
            {
                "objectDefMap": {
                    "Block": {
                        "name": "Block",
                        "fieldDefs": [
                            {"type": "list", "name": "tags", "of": {"type": "string"}},
                            {
                                "type": "polymorphic_list",
                                "name": "items",
                                "of": [{"type": "reference", "documentName": "Post"}, {"type": "enum", "options": ["a", "b"]}],
                            },
                            {"type": "inline_object", "name": "meta", "fieldDefs": [{"type": "boolean", "name": "flag"}]},
                        ],
                    }
                }
            }
        )

        tags, items, meta = schema.object_def_map["Block"].field_defs
        assert tags == ListFieldDef(name="tags", of=StringListItem())
        assert items == PolymorphicListFieldDef(name="items", of=[ReferenceListItem(document_name="Post"), EnumListItem(options=["a", "b"])])
        assert isinstance(meta, InlineObjectFieldDef)
        assert meta.field_defs[0].name == "flag"

    def test_unknown_kinds_are_kept(self, loader):
        schema = loader.parse(
            {
                "documentDefMap": {
                    "Place": {
                        "name": "Place",
                        "fieldDefs": [
                            {"type": "geopoint", "name": "location"},
                            {"type": "list", "name": "dates", "of": {"type": "date"}},
                        ],
                    }
                }
            }
        )

        location, dates = schema.document_def_map["Place"].field_defs
        assert location == UnknownFieldDef(name="location", type="geopoint")
        assert dates.of == UnknownListItem(type="date")

    def test_field_without_type_reports_path(self, loader):
        with pytest.raises(SchemaLoadError) as exc_info:
            loader.parse({"documentDefMap": {"Post": {"name": "Post", "fieldDefs": [{"name": "title"}]}}})
        assert exc_info.value.path == "#/documentDefMap/Post/fieldDefs/0"

    def test_definition_must_be_object(self, loader):
        with pytest.raises(SchemaLoadError, match="#/objectDefMap/SEO"):
            loader.parse({"objectDefMap": {"SEO": ["not", "an", "object"]}})

    def test_schema_must_be_object(self, loader):
        with pytest.raises(SchemaLoadError):
            loader.parse([])

    def test_missing_label_stays_empty(self, loader):
        schema = loader.parse({"documentDefMap": {"Post": {"name": "Post", "fieldDefs": []}}})

        post = schema.document_def_map["Post"]
        assert post.label == ""
        assert build_document_type(post).declaration_text.startswith("export type Post = {\n")

    def test_unknown_kinds_keep_their_payload(self, loader):
        raw_field = {"type": "geopoint", "name": "location", "required": True, "precision": 6, "options": {"srid": 4326}}
        raw_item = {"type": "date", "format": "iso"}
        schema = loader.parse(
            {
                "documentDefMap": {
                    "Place": {
                        "name": "Place",
                        "fieldDefs": [raw_field, {"type": "list", "name": "dates", "of": raw_item}],
                    }
                }
            }
        )

        location, dates = schema.document_def_map["Place"].field_defs
        assert location.extra == {"precision": 6, "options": {"srid": 4326}}
        assert dates.of.extra == {"format": "iso"}

        field_defs = dump_schema(schema)["documentDefMap"]["Place"]["fieldDefs"]
        assert field_defs[0] == raw_field
        assert field_defs[1]["of"] == raw_item


class TestLoadAndDump:
    def test_load_schema_from_file(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text(json.dumps({"documentDefMap": {"Post": {"name": "Post", "label": "Post"}}}))

        schema = load_schema(path)
        assert list(schema.document_def_map) == ["Post"]

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "schema.json"
        path.write_text("{not json")
        with pytest.raises(SchemaLoadError, match="invalid JSON"):
            load_schema(path)

    def test_dump_uses_json_keys(self):
        schema = SchemaDef(
            document_def_map={
                "Post": DocumentDef(
                    name="Post",
                    label="Post",
                    field_defs=[ListFieldDef(name="related", of=ReferenceListItem(document_name="Post"))],
                )
            }
        )
        data = dump_schema(schema)

        assert data["documentDefMap"]["Post"]["fieldDefs"] == [
            {"type": "list", "name": "related", "required": False, "of": {"type": "reference", "documentName": "Post"}}
        ]
        assert data["documentDefMap"]["Post"]["computedFields"] == []
        assert data["objectDefMap"] == {}

    def test_dumped_schema_loads_back(self):
        path_schema = SchemaLoader().parse(
            {
                "documentDefMap": {
                    "Post": {
                        "name": "Post",
                        "label": "Post",
                        "fieldDefs": [
                            {"type": "inline_object", "name": "meta", "required": True, "fieldDefs": [{"type": "image", "name": "cover"}]},
                            {"type": "geopoint", "name": "location"},
                        ],
                    }
                }
            }
        )
        assert SchemaLoader().parse(dump_schema(path_schema)) == path_schema
