"""Tests unitarios para OrderService."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from shopify_orders.db.shopify_clients.pagination import Pagination
from shopify_orders.schemas.fulfillment_schemas import Fulfillment, FulfillmentResource
from shopify_orders.schemas.metafield_schemas import Metafield, MetafieldsResource
from shopify_orders.schemas.options import ListOptions, OrderCancelOptions, OrderCountOptions, OrderListOptions
from shopify_orders.schemas.order_schemas import Order, OrderResource, OrdersResource
from shopify_orders.services.orders.order_service import OrderService
from shopify_orders.utils.error_handler import PartialResultsError, TransportError


def orders_page(*ids):
    return OrdersResource(orders=[Order(id=i) for i in ids])


@pytest.fixture
def client():
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.put = AsyncMock()
    client.delete = AsyncMock()
    client.count = AsyncMock()
    client.list_with_pagination = AsyncMock()
    return client


@pytest.fixture
def service(client):
    return OrderService(client)


class TestOrderListing:
    """Tests para list, list_with_pagination y list_all."""

    @pytest.mark.asyncio
    async def test_list_uses_default_page_limit(self, service, client):
        """Debe usar el límite configurado si no se pasan opciones."""
        client.list_with_pagination.return_value = (orders_page(1, 2), Pagination())

        orders = await service.list()

        assert [o.id for o in orders] == [1, 2]
        path, model, options = client.list_with_pagination.call_args.args
        assert path == "orders.json"
        assert model is OrdersResource
        assert options.limit == 50

    @pytest.mark.asyncio
    async def test_list_with_pagination_returns_next_options(self, service, client):
        """Debe devolver las órdenes y la paginación del cliente."""
        next_options = ListOptions(page_info="abc", limit=2)
        client.list_with_pagination.return_value = (orders_page(1, 2), Pagination(next_page_options=next_options))

        orders, pagination = await service.list_with_pagination(OrderListOptions(limit=2))

        assert len(orders) == 2
        assert pagination.next_page_options is next_options

    @pytest.mark.asyncio
    async def test_list_all_follows_cursors(self, service, client):
        """Debe seguir los cursores hasta la última página."""
        page2 = ListOptions(page_info="c2", limit=3)
        page3 = ListOptions(page_info="c3", limit=3)
        client.list_with_pagination.side_effect = [
            (orders_page(1, 2, 3), Pagination(next_page_options=page2)),
            (orders_page(4, 5, 6), Pagination(next_page_options=page3)),
            (orders_page(7), Pagination()),
        ]

        orders = await service.list_all(OrderListOptions(limit=3, status="any"))

        assert [o.id for o in orders] == [1, 2, 3, 4, 5, 6, 7]
        sent = [call.args[2] for call in client.list_with_pagination.call_args_list]
        assert sent[0].status.value == "any"
        assert sent[1] is page2
        assert sent[2] is page3

    @pytest.mark.asyncio
    async def test_list_all_partial_results(self, service, client):
        """Debe exponer las órdenes ya obtenidas si una página falla."""
        client.list_with_pagination.side_effect = [
            (orders_page(1, 2), Pagination(next_page_options=ListOptions(page_info="c2"))),
            TransportError("HTTP 502", api_response_code=502),
        ]

        with pytest.raises(PartialResultsError) as exc_info:
            await service.list_all()

        assert [o.id for o in exc_info.value.records] == [1, 2]
        assert exc_info.value.error.api_response_code == 502

    @pytest.mark.asyncio
    async def test_count(self, service, client):
        """Debe consultar orders/count.json con los filtros."""
        client.count.return_value = 12
        options = OrderCountOptions(status="open")

        assert await service.count(options) == 12
        client.count.assert_awaited_once_with("orders/count.json", options)


class TestSingleOrder:
    """Tests para operaciones sobre una orden."""

    @pytest.mark.asyncio
    async def test_get(self, service, client):
        """Debe pedir orders/{id}.json y devolver la orden."""
        client.get.return_value = OrderResource(order=Order(id=450789469))

        order = await service.get(450789469)

        assert order.id == 450789469
        client.get.assert_awaited_once_with("orders/450789469.json", OrderResource, None)

    @pytest.mark.asyncio
    async def test_create(self, service, client):
        """Debe enviar la orden envuelta en 'order'."""
        client.post.return_value = OrderResource(order=Order(id=1, name="#1001"))

        created = await service.create(Order(email="a@example.com"))

        assert created.id == 1
        path, body, model = client.post.call_args.args
        assert path == "orders.json"
        assert body.order.email == "a@example.com"
        assert model is OrderResource

    @pytest.mark.asyncio
    async def test_update_requires_id(self, service, client):
        """Debe fallar si la orden no tiene id."""
        with pytest.raises(ValueError):
            await service.update(Order(note="x"))

        client.put.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update(self, service, client):
        """Debe enviar PUT a orders/{id}.json."""
        client.put.return_value = OrderResource(order=Order(id=5, note="x"))

        updated = await service.update(Order(id=5, note="x"))

        assert updated.note == "x"
        assert client.put.call_args.args[0] == "orders/5.json"

    @pytest.mark.asyncio
    async def test_cancel_with_options(self, service, client):
        """Debe enviar las opciones de cancelación a orders/{id}/cancel.json."""
        client.post.return_value = OrderResource(order=Order(id=5))
        options = OrderCancelOptions(reason="customer", restock=True)

        await service.cancel(5, options)

        client.post.assert_awaited_once_with("orders/5/cancel.json", options, OrderResource)

    @pytest.mark.asyncio
    async def test_close_and_open(self, service, client):
        """Debe usar los endpoints close y open."""
        client.post.return_value = OrderResource(order=Order(id=5))

        await service.close(5)
        await service.open(5)

        paths = [call.args[0] for call in client.post.call_args_list]
        assert paths == ["orders/5/close.json", "orders/5/open.json"]

    @pytest.mark.asyncio
    async def test_delete(self, service, client):
        """Debe enviar DELETE a orders/{id}.json."""
        await service.delete(5)

        client.delete.assert_awaited_once_with("orders/5.json")


class TestOrderSubResources:
    """Tests para los atajos de metafields y fulfillments."""

    @pytest.mark.asyncio
    async def test_list_metafields(self, service, client):
        """Debe listar metafields bajo la orden."""
        client.get.return_value = MetafieldsResource(metafields=[Metafield(id=1, key="k")])

        metafields = await service.list_metafields(450789469)

        assert metafields[0].key == "k"
        assert client.get.call_args.args[0] == "orders/450789469/metafields.json"

    @pytest.mark.asyncio
    async def test_count_fulfillments(self, service, client):
        """Debe contar fulfillments bajo la orden."""
        client.count.return_value = 2

        assert await service.count_fulfillments(7) == 2
        client.count.assert_awaited_once_with("orders/7/fulfillments/count.json", None)

    @pytest.mark.asyncio
    async def test_complete_fulfillment(self, service, client):
        """Debe completar el fulfillment de la orden."""
        client.post.return_value = FulfillmentResource(fulfillment=Fulfillment(id=3, status="success"))

        fulfillment = await service.complete_fulfillment(7, 3)

        assert fulfillment.status == "success"
        assert client.post.call_args.args[0] == "orders/7/fulfillments/3/complete.json"

    def test_accessors_are_scoped_to_order(self, service):
        """Debe crear servicios con la ruta de la orden."""
        assert service.metafields(9).location.prefix == "orders/9/metafields"
        assert service.fulfillments(9).location.prefix == "orders/9/fulfillments"
