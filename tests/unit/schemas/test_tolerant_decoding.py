"""Tests unitarios para la decodificación tolerante de properties y requested_fulfillment_service_id."""

import json
from decimal import Decimal

import pytest

from shopify_orders.schemas.base import decode_record
from shopify_orders.schemas.common_schemas import NoteAttribute
from shopify_orders.schemas.line_item_schemas import LineItem, ShippingLine
from shopify_orders.schemas.order_schemas import Order, OrdersResource
from shopify_orders.schemas.tolerant import (
    EmptyProperties,
    ManyProperties,
    SingleProperty,
    classify_properties,
    collapse_properties,
    normalize_service_id,
)
from shopify_orders.utils.error_handler import DecodeError, ErrorCode


def decode_line_item(**fields) -> LineItem:
    return decode_record(LineItem, json.dumps({"id": 1, **fields}))


def decode_shipping_line(**fields) -> ShippingLine:
    return decode_record(ShippingLine, json.dumps({"id": 1, **fields}))


class TestLineItemProperties:
    """Tests para las formas aceptadas de line_items[].properties."""

    def test_array_of_attributes(self):
        """Debe conservar un arreglo de atributos en orden."""
        item = decode_line_item(properties=[{"name": "a", "value": "1"}, {"name": "b", "value": "2"}])

        assert [p.name for p in item.properties] == ["a", "b"]
        assert [p.value for p in item.properties] == ["1", "2"]

    def test_single_object_becomes_one_element_list(self):
        """Debe envolver un objeto suelto en una lista de un elemento."""
        item = decode_line_item(properties={"name": "gift", "value": "yes"})

        assert item.properties == [NoteAttribute(name="gift", value="yes")]

    def test_empty_object_becomes_empty_list(self):
        """Debe tratar {} como lista vacía."""
        item = decode_line_item(properties={})

        assert item.properties == []

    def test_empty_array(self):
        """Debe aceptar un arreglo vacío."""
        item = decode_line_item(properties=[])

        assert item.properties == []

    def test_null_becomes_empty_list(self):
        """Debe tratar null como lista vacía."""
        item = decode_line_item(properties=None)

        assert item.properties == []

    def test_absent_field_is_empty_list(self):
        """Debe devolver lista vacía si el campo no viene."""
        item = decode_line_item()

        assert item.properties == []

    def test_non_string_values_are_kept(self):
        """Debe conservar valores no string tal como vienen."""
        item = decode_line_item(properties=[{"name": "count", "value": 3}])

        assert item.properties[0].value == 3

    def test_string_is_rejected(self):
        """Debe fallar con DecodeError si properties es un string."""
        with pytest.raises(DecodeError) as exc_info:
            decode_line_item(properties="engraving")

        assert exc_info.value.model == "LineItem"
        assert exc_info.value.error_code == ErrorCode.DECODE_ERROR
        assert exc_info.value.errors[0]["loc"] == ("properties",)

    def test_number_is_rejected(self):
        """Debe fallar con DecodeError si properties es un número."""
        with pytest.raises(DecodeError):
            decode_line_item(properties=7)

    def test_null_entry_in_array_is_blank_attribute(self):
        """Debe decodificar un elemento null del arreglo como atributo vacío."""
        item = decode_line_item(properties=[None, {"name": "gift", "value": "yes"}])

        assert item.properties == [NoteAttribute(), NoteAttribute(name="gift", value="yes")]

    def test_malformed_entry_in_array_is_rejected(self):
        """Debe fallar si un elemento del arreglo no es un objeto name/value."""
        with pytest.raises(DecodeError):
            decode_line_item(properties=[{"name": "ok", "value": "1"}, "broken"])

    def test_empty_properties_serialize_as_empty_array(self):
        """Debe re-serializar una lista vacía como [] y no como {}."""
        item = decode_line_item(properties={})

        assert item.to_payload()["properties"] == []

        again = decode_record(LineItem, json.dumps(item.to_payload()))
        assert again.properties == []


class TestClassifyProperties:
    """Tests para la clasificación de la forma de properties."""

    def test_classify_shapes(self):
        """Debe reconocer cada forma de entrada."""
        assert classify_properties(None) == EmptyProperties()
        assert classify_properties({}) == EmptyProperties()
        assert classify_properties({"name": "a", "value": "b"}) == SingleProperty(NoteAttribute(name="a", value="b"))
        assert isinstance(classify_properties([]), ManyProperties)

    def test_collapse_many(self):
        """Debe convertir ManyProperties en lista en el mismo orden."""
        shape = ManyProperties((NoteAttribute(name="x"), NoteAttribute(name="y")))

        assert [p.name for p in collapse_properties(shape)] == ["x", "y"]

    def test_classify_rejects_boolean(self):
        """Debe rechazar tipos que no son arreglo ni objeto."""
        with pytest.raises(ValueError):
            classify_properties(True)


class TestRequestedFulfillmentServiceId:
    """Tests para la normalización de requested_fulfillment_service_id."""

    def test_null_becomes_empty_string(self):
        """Debe convertir null en string vacío."""
        assert decode_shipping_line(requested_fulfillment_service_id=None).requested_fulfillment_service_id == ""

    def test_absent_is_empty_string(self):
        """Debe usar string vacío si el campo no viene."""
        assert decode_shipping_line().requested_fulfillment_service_id == ""

    def test_integer_becomes_string(self):
        """Debe convertir 42 en "42"."""
        assert decode_shipping_line(requested_fulfillment_service_id=42).requested_fulfillment_service_id == "42"

    def test_string_passes_through(self):
        """Debe dejar los strings sin cambios."""
        assert decode_shipping_line(requested_fulfillment_service_id="abc").requested_fulfillment_service_id == "abc"

    def test_integral_float_has_no_fraction(self):
        """Debe convertir 42.0 en "42"."""
        raw = b'{"id": 1, "requested_fulfillment_service_id": 42.0}'

        assert decode_record(ShippingLine, raw).requested_fulfillment_service_id == "42"

    def test_fractional_float_keeps_fraction(self):
        """Debe conservar la parte decimal de números no enteros."""
        assert normalize_service_id(42.5) == "42.5"

    def test_decimal(self):
        """Debe aceptar Decimal sin notación científica."""
        assert normalize_service_id(Decimal("4.20E+1")) == "42"

    def test_boolean_is_rejected(self):
        """Debe fallar con DecodeError para booleanos."""
        with pytest.raises(DecodeError):
            decode_shipping_line(requested_fulfillment_service_id=True)

    def test_object_is_rejected(self):
        """Debe fallar con DecodeError para objetos."""
        with pytest.raises(DecodeError):
            decode_shipping_line(requested_fulfillment_service_id={"id": 42})

    def test_array_is_rejected(self):
        """Debe fallar con DecodeError para arreglos."""
        with pytest.raises(DecodeError):
            decode_shipping_line(requested_fulfillment_service_id=[42])


class TestOrderDecoding:
    """Tests para la decodificación de órdenes completas."""

    def test_order_with_mixed_shapes(self, order_payload):
        """Debe decodificar una orden con properties y service id en formas distintas."""
        order = decode_record(Order, json.dumps(order_payload))

        assert order.id == 450789469
        assert order.total_price == Decimal("598.94")
        assert order.line_items[0].properties[0].name == "Custom Engraving"
        assert order.line_items[1].properties == []
        assert order.shipping_lines[0].requested_fulfillment_service_id == ""

    def test_page_envelope(self, order_payload):
        """Debe decodificar el envoltorio {"orders": [...]}."""
        resource = decode_record(OrdersResource, json.dumps({"orders": [order_payload, order_payload]}))

        assert len(resource.orders) == 2

    def test_malformed_json(self):
        """Debe fallar con DecodeError si el JSON está mal formado."""
        with pytest.raises(DecodeError):
            decode_record(OrdersResource, b'{"orders": [')

    def test_one_bad_line_item_fails_the_page(self, order_payload):
        """Debe fallar toda la página si un line item tiene una forma no reconocida."""
        order_payload["line_items"][0]["properties"] = "not-a-list"

        with pytest.raises(DecodeError):
            decode_record(OrdersResource, json.dumps({"orders": [order_payload]}))
