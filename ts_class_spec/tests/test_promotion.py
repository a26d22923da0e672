import pytest

from ts_class_spec.code_block import CodeBlock
from ts_class_spec.function_spec import FunctionSpec
from ts_class_spec.parameter_spec import ParameterSpec
from ts_class_spec.promotion import analyze, constructor_properties, property_init_pattern, strip_property_inits
from ts_class_spec.property_spec import PropertySpec
from ts_class_spec.type_names import NUMBER, STRING, array_type


def make_constructor(body, *parameters):
    cstr = FunctionSpec.constructor_builder().add_parameters(*parameters)
    return cstr.with_body(CodeBlock(body)) if body is not None else cstr


X = PropertySpec.create("x", NUMBER)
X_PARAM = ParameterSpec.create("x", NUMBER)


class TestPropertyInitPattern:
    @pytest.mark.parametrize(
        "body",
        [
            "this.x = x;",
            "this.x = x",
            "this.x = x;\n",
            "super();\nthis.x = x;\n",
            "super();this.x = x;",
            "  \n\tthis.x = x  ;",
            "this.x = x\nfoo();",
        ],
    )
    def test_matches_standalone_statement(self, body):
        assert property_init_pattern("x").search(body)

    @pytest.mark.parametrize(
        "body",
        [
            "",
            "this.x=x;",
            "this.x = x + 1;",
            "this.x = xy;",
            "this.xy = x;",
            "foo(this.x = x);",
            "that.this.x = x;",
            "this.x = x.clone();",
            "this.x = y;",
        ],
    )
    def test_rejects_other_shapes(self, body):
        assert not property_init_pattern("x").search(body)

    def test_escapes_name(self):
        assert property_init_pattern("$x").search("this.$x = $x;")
        assert not property_init_pattern("a.b").search("this.aXb = aXb;")


class TestConstructorProperties:
    def test_no_constructor(self):
        assert constructor_properties([X], None) == {}

    def test_constructor_without_body(self):
        assert constructor_properties([X], make_constructor(None, X_PARAM)) == {}

    def test_promoted(self):
        result = constructor_properties([X], make_constructor("this.x = x;\n", X_PARAM))
        assert result == {"x": X}

    def test_keeps_declaration_order(self):
        y = PropertySpec.create("y", NUMBER)
        cstr = make_constructor("this.y = y;\nthis.x = x;\n", ParameterSpec.create("y", NUMBER), X_PARAM)
        assert list(constructor_properties([X, y], cstr)) == ["x", "y"]

    @pytest.mark.parametrize(
        "prop,param,body",
        [
            (X, ParameterSpec.create("x", STRING), "this.x = x;"),
            (X, ParameterSpec.create("x", NUMBER, True), "this.x = x;"),
            (PropertySpec.create("x", NUMBER, True), X_PARAM, "this.x = x;"),
            (X.with_initializer("0"), X_PARAM, "this.x = x;"),
            (X, X_PARAM, "this.x = x * 2;"),
            (X, X_PARAM, "console.log(x);"),
            (X, ParameterSpec.create("y", NUMBER), "this.x = y;"),
        ],
    )
    def test_not_promoted(self, prop, param, body):
        assert constructor_properties([prop], make_constructor(body, param)) == {}

    def test_rest_parameter_never_promoted(self):
        items = PropertySpec.create("items", array_type(NUMBER))
        cstr = make_constructor("this.items = items;").rest(ParameterSpec.create("items", array_type(NUMBER)))
        assert constructor_properties([items], cstr) == {}

    def test_structural_type_equality(self):
        items = PropertySpec.create("items", array_type(STRING))
        cstr = make_constructor("this.items = items;", ParameterSpec.create("items", array_type("string")))
        assert constructor_properties([items], cstr) == {"items": items}

    def test_duplicate_names_first_wins(self):
        first = X
        second = PropertySpec.create("x", NUMBER).add_doc("duplicate")
        result = constructor_properties([first, second], make_constructor("this.x = x;", X_PARAM))
        assert result["x"] is first


class TestStripPropertyInits:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ("this.x = x;\nthis.y = y;\n", ""),
            ("this.x = x;\nthis.y = y;", ""),
            ("super();\nthis.x = x;\nthis.init();\n", "super();\nthis.init();\n"),
            ("super();this.x = x;this.init();", "super();this.init();"),
            ("this.x = x\nthis.y = y\n", ""),
            ("  this.x = x;  \nlog();\n", "log();\n"),
            ("this.x = x;\nthis.y = y * 2;\n", "this.y = y * 2;\n"),
            ("super(a);\n  this.x = x;\n  this.y = y;\n  this.init();\n", "super(a);\n  this.init();\n"),
            ("super();\n\nthis.x = x;\nthis.init();\n", "super();\n\nthis.init();\n"),
            ("super();\nthis.x = x;this.init();\n", "super();\nthis.init();\n"),
        ],
    )
    def test_strip(self, body, expected):
        props = [X, PropertySpec.create("y", NUMBER)]
        assert str(strip_property_inits(CodeBlock(body), props)) == expected


class TestAnalyze:
    def test_body_and_fields(self):
        label = PropertySpec.create("label", STRING)
        cstr = make_constructor("this.x = x;\nthis.label = 'p';\n", X_PARAM)
        promotion = analyze([label, X], cstr)

        assert promotion.promoted == {"x": X}
        assert str(promotion.body) == "this.label = 'p';\n"
        assert promotion.fields([label, X]) == [label]
        assert promotion.promoted_parameter("x") is X
        assert promotion.promoted_parameter("label") is None

    def test_unpromoted_body_untouched(self):
        cstr = make_constructor("this.x = x + 1;\n", X_PARAM)
        promotion = analyze([X], cstr)
        assert promotion.promoted == {}
        assert promotion.body == cstr.body

    def test_promoted_name_excludes_every_duplicate(self):
        second = PropertySpec.create("x", STRING).add_doc("duplicate")
        label = PropertySpec.create("label", STRING)
        promotion = analyze([X, label, second], make_constructor("this.x = x;", X_PARAM))
        assert promotion.fields([X, label, second]) == [label]

    def test_no_constructor(self):
        promotion = analyze([X], None)
        assert promotion.body is None
        assert promotion.fields([X]) == [X]
