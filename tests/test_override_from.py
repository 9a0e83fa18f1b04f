"""
Override Merge Tests

Tests for override_from(): layering a child definition on top of a
(copied) parent definition.
"""

import unittest

from componentdef import (
    SCOPE_PROTOTYPE,
    AutowireMode,
    ComponentDefinition,
    DependencyCheck,
    DescriptiveResource,
    LookupOverride,
    MappingClassLoader,
    Qualifier,
    Role,
)

from conftest import MinimalDefinition, create_definition
from fixtures import Named, PartFactory, Widget


class TestReplaceIfPresent(unittest.TestCase):
    """Fields taken from the child only when the child sets them."""

    def test_empty_scope_keeps_parent_scope(self):
        """An empty child scope never clears the parent's scope."""
        parent = create_definition("myapp.Widget", scope=SCOPE_PROTOTYPE)
        child = create_definition(scope="")

        parent.override_from(child)

        self.assertEqual(parent.scope, SCOPE_PROTOTYPE)

    def test_child_scope_wins(self):
        parent = create_definition("myapp.Widget", scope="singleton")
        child = create_definition(scope=SCOPE_PROTOTYPE)

        parent.override_from(child)

        self.assertEqual(parent.scope, SCOPE_PROTOTYPE)

    def test_empty_class_name_keeps_parent_class(self):
        parent = ComponentDefinition("myapp.Widget")
        child = ComponentDefinition()

        parent.override_from(child)

        self.assertEqual(parent.class_name, "myapp.Widget")

    def test_child_class_name_wins(self):
        parent = ComponentDefinition("myapp.Widget")
        child = ComponentDefinition("myapp.SpecialWidget")

        parent.override_from(child)

        self.assertEqual(parent.class_name, "myapp.SpecialWidget")

    def test_factory_names(self):
        parent = create_definition(factory_component_name="factory", factory_method_name="build")
        child = create_definition(factory_method_name="build_special")

        parent.override_from(child)

        self.assertEqual(parent.factory_component_name, "factory")
        self.assertEqual(parent.factory_method_name, "build_special")

    def test_description(self):
        parent = create_definition(description="parent")
        parent.override_from(create_definition())

        self.assertEqual(parent.description, "parent")

        parent.override_from(create_definition(description="child"))
        self.assertEqual(parent.description, "child")


class TestUnconditionalReplace(unittest.TestCase):
    """Fields always taken from the child, even at their default values."""

    def test_flags_take_child_defaults(self):
        """A child's default flag values still override the parent."""
        parent = create_definition(
            is_abstract=True,
            lazy_init=True,
            primary=True,
            synthetic=True,
            autowire_candidate=False,
            non_public_access_allowed=False,
            lenient_constructor_resolution=False,
            role=Role.INFRASTRUCTURE,
        )
        parent.autowire_mode = AutowireMode.BY_TYPE
        parent.dependency_check = DependencyCheck.ALL
        parent.depends_on = ["database"]

        parent.override_from(ComponentDefinition())

        self.assertFalse(parent.is_abstract)
        self.assertFalse(parent.lazy_init)
        self.assertFalse(parent.primary)
        self.assertFalse(parent.synthetic)
        self.assertTrue(parent.autowire_candidate)
        self.assertTrue(parent.non_public_access_allowed)
        self.assertTrue(parent.lenient_constructor_resolution)
        self.assertEqual(parent.role, Role.APPLICATION)
        self.assertEqual(parent.autowire_mode, AutowireMode.NONE)
        self.assertEqual(parent.dependency_check, DependencyCheck.NONE)
        self.assertEqual(parent.depends_on, ())

    def test_child_values_win(self):
        parent = ComponentDefinition()
        child = create_definition(primary=True, role=Role.SUPPORT)
        child.autowire_mode = AutowireMode.CONSTRUCTOR
        child.depends_on = ["cache"]

        parent.override_from(child)

        self.assertTrue(parent.primary)
        self.assertEqual(parent.role, Role.SUPPORT)
        self.assertEqual(parent.autowire_mode, AutowireMode.CONSTRUCTOR)
        self.assertEqual(parent.depends_on, ("cache",))

    def test_resource_taken_from_child(self):
        parent = ComponentDefinition()
        parent.resource_description = "parent.yaml"
        child = ComponentDefinition()
        child.resource = DescriptiveResource("child.yaml")

        parent.override_from(child)

        self.assertEqual(parent.resource_description, "child.yaml")

    def test_instance_supplier_taken_from_child(self):
        parent = ComponentDefinition()
        parent.instance_supplier = lambda: Widget()
        supplier = lambda: Widget("blue")
        child = ComponentDefinition()
        child.instance_supplier = supplier

        parent.override_from(child)

        self.assertIs(parent.instance_supplier, supplier)


class TestAdditiveMerge(unittest.TestCase):
    """Collections merged from the child on top of the parent."""

    def test_disjoint_properties_union(self):
        """Disjoint property names are unioned."""
        parent = create_definition(properties={"color": "red", "weight": 3})
        child = create_definition(properties={"size": "large"})

        parent.override_from(child)

        self.assertEqual(len(parent.property_values), 3)
        self.assertEqual(parent.property_values.get("color"), "red")
        self.assertEqual(parent.property_values.get("weight"), 3)
        self.assertEqual(parent.property_values.get("size"), "large")

    def test_property_collision_child_wins(self):
        """On the same property name the child's value is effective."""
        parent = create_definition(properties={"x": "parent"})
        child = create_definition(properties={"x": "child"})

        parent.override_from(child)

        self.assertEqual(len(parent.property_values), 1)
        self.assertEqual(parent.property_values.get("x"), "child")

    def test_merge_does_not_alias_child_values(self):
        parent = create_definition(properties={"color": "red"})
        child = create_definition(properties={"size": "large"})

        parent.override_from(child)
        child.property_values.get_property_value("size").value = "small"

        self.assertEqual(parent.property_values.get("size"), "large")

    def test_constructor_arguments_union(self):
        parent = ComponentDefinition()
        parent.constructor_argument_values.add_indexed_argument_value(0, "localhost")
        parent.constructor_argument_values.add_indexed_argument_value(1, 5432)
        child = ComponentDefinition()
        child.constructor_argument_values.add_indexed_argument_value(1, 6543)
        child.constructor_argument_values.add_indexed_argument_value(2, "ssl")

        parent.override_from(child)

        args = parent.constructor_argument_values
        self.assertEqual(args.argument_count, 3)
        self.assertEqual(args.get_indexed_argument_value(0).value, "localhost")
        self.assertEqual(args.get_indexed_argument_value(1).value, 6543)
        self.assertEqual(args.get_indexed_argument_value(2).value, "ssl")

    def test_method_overrides_appended(self):
        parent = ComponentDefinition()
        parent.method_overrides.add_override(LookupOverride("create_part", "part"))
        child = ComponentDefinition()
        child.method_overrides.add_override(LookupOverride("create_part", "specialPart"))

        parent.override_from(child)

        self.assertEqual(len(parent.method_overrides), 2)
        self.assertEqual(
            [override.component_name for override in parent.method_overrides],
            ["part", "specialPart"],
        )

    def test_qualifiers_merged_by_type_name(self):
        parent = ComponentDefinition()
        parent.add_qualifier(Qualifier(Named, "parent"))
        parent.add_qualifier(Qualifier("myapp.Region", "eu"))
        child = ComponentDefinition()
        child.add_qualifier(Qualifier(Named, "child"))

        parent.override_from(child)

        self.assertEqual(len(parent.qualifiers), 2)
        self.assertEqual(parent.get_qualifier(Named).value, "child")
        self.assertEqual(parent.get_qualifier("myapp.Region").value, "eu")

    def test_attributes_merged(self):
        parent = ComponentDefinition()
        parent.set_attribute("a", 1)
        parent.set_attribute("b", 2)
        child = ComponentDefinition()
        child.set_attribute("b", 3)

        parent.override_from(child)

        self.assertEqual(parent.get_attribute("a"), 1)
        self.assertEqual(parent.get_attribute("b"), 3)

    def test_merge_with_itself_changes_nothing(self):
        """Merging a definition into itself keeps every collection entry."""
        definition = create_definition(Widget, properties={"color": "red"})
        definition.constructor_argument_values.add_generic_argument_value("db", name="host")
        definition.constructor_argument_values.add_generic_argument_value(5432, type_name=int)
        definition.constructor_argument_values.add_indexed_argument_value(0, "main")
        definition.method_overrides.add_override(LookupOverride("run"))
        snapshot = definition.clone()

        definition.override_from(definition)

        self.assertEqual(definition, snapshot)
        self.assertEqual(len(definition.constructor_argument_values.generic_argument_values), 2)
        self.assertEqual(
            definition.constructor_argument_values.get_generic_argument_value(required_name="host").value,
            "db",
        )

    def test_empty_child_collections_do_not_allocate(self):
        parent = ComponentDefinition()

        parent.override_from(ComponentDefinition())

        self.assertIsNone(parent._constructor_argument_values)
        self.assertIsNone(parent._property_values)


class TestResolvedClassMerge(unittest.TestCase):
    """Resolved classes flow from the child to the parent."""

    def test_child_resolved_class_replaces_parent(self):
        parent = ComponentDefinition(PartFactory)
        child = ComponentDefinition(Widget)

        parent.override_from(child)

        self.assertIs(parent.component_class, Widget)

    def test_parent_resolved_class_kept_without_child_class(self):
        parent = ComponentDefinition(Widget)

        parent.override_from(ComponentDefinition())

        self.assertIs(parent.component_class, Widget)


class TestInitDestroyMerge(unittest.TestCase):
    """Init/destroy names and enforce flags move together."""

    def test_enforce_flag_not_copied_without_name(self):
        parent = create_definition(init_method_name="start", enforce_init_method=True)
        child = create_definition(enforce_init_method=False)

        parent.override_from(child)

        self.assertEqual(parent.init_method_name, "start")
        self.assertTrue(parent.enforce_init_method)

    def test_name_and_flag_taken_together(self):
        parent = create_definition(destroy_method_name="close", enforce_destroy_method=True)
        child = create_definition(destroy_method_name="shutdown", enforce_destroy_method=False)

        parent.override_from(child)

        self.assertEqual(parent.destroy_method_name, "shutdown")
        self.assertFalse(parent.enforce_destroy_method)


class TestOverrideFromMinimalDefinition(unittest.TestCase):
    """Merging from an object implementing only the minimal view."""

    def test_minimal_merge(self):
        parent = create_definition("myapp.Widget", properties={"color": "red"}, primary=True)
        child = MinimalDefinition()
        child.scope = SCOPE_PROTOTYPE
        child.property_values.add("size", "large")
        child.resource_description = "legacy registry"

        parent.override_from(child)

        self.assertEqual(parent.class_name, "myapp.Widget")
        self.assertEqual(parent.scope, SCOPE_PROTOTYPE)
        self.assertEqual(parent.property_values.get("color"), "red")
        self.assertEqual(parent.property_values.get("size"), "large")
        self.assertEqual(parent.resource_description, "legacy registry")
        # Rich-only settings are left alone
        self.assertTrue(parent.primary)


class TestParentChildScenario(unittest.TestCase):
    """End-to-end parent/child merge followed by validation."""

    def test_widget_scenario(self):
        class Widget:
            pass

        loader = MappingClassLoader({"Widget": Widget})
        parent = create_definition("Widget", scope="", properties={"color": "red"})
        child = create_definition("", scope="prototype", properties={"size": "large"}, primary=True)

        parent.override_from(child)
        parent.resolve_class(loader)
        parent.validate()

        self.assertEqual(parent.class_name, "Widget")
        self.assertIs(parent.component_class, Widget)
        self.assertEqual(parent.scope, "prototype")
        self.assertEqual(
            {pv.name: pv.value for pv in parent.property_values},
            {"color": "red", "size": "large"},
        )
        self.assertTrue(parent.primary)

    def test_widget_scenario_before_resolution(self):
        """Without resolution the merged definition keeps the plain name."""
        parent = create_definition("Widget", scope="", properties={"color": "red"})
        child = create_definition("", scope="prototype", properties={"size": "large"}, primary=True)

        parent.override_from(child)
        parent.validate()

        self.assertEqual(parent.class_name, "Widget")
        self.assertEqual(parent.scope, "prototype")
        self.assertEqual(len(parent.property_values), 2)
        self.assertTrue(parent.primary)


if __name__ == '__main__':
    unittest.main()
