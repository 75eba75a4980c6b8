"""Unit tests for the resource clients."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal

import httpx
import pytest
from respx import MockRouter

from practice_client.domain.appointments import AppointmentCreate, AppointmentService
from practice_client.domain.calendar import CalendarService
from practice_client.domain.clients import ClientService, ClientUpdate
from practice_client.domain.invoices import InvoiceCreate, InvoiceLineItemCreate, InvoiceService
from practice_client.domain.leads import LeadCreate, LeadService, LeadUpdate
from practice_client.domain.payments import PaymentService
from practice_client.domain.services import ServiceCatalog, ServiceCreate
from practice_client.gateway import ApiGateway

from .helpers import BASE_URL, bearer, body

HOST = "api.practice.test"

LEAD = {
    "id": "l1",
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "ada@example.com",
    "phone": "555-0100",
    "pref_contact": "email",
    "status": "lead",
    "createdAt": "2024-05-01T10:00:00.000Z",
    "updatedAt": "2024-05-01T10:00:00.000Z",
}

CLIENT = {
    "id": "c1",
    "first_name": "Grace",
    "last_name": "Hopper",
    "email": "grace@example.com",
    "phone": "555-0101",
    "pref_contact": "phone",
    "city": "Arlington",
}

INVOICE = {
    "id": "i1",
    "invoiceNumber": "INV-0001",
    "clientId": "c1",
    "status": "issued",
    "issueDate": "2024-05-01",
    "currency": "usd",
    "subtotal": "150.00",
    "tax": "12.00",
    "total": "162.00",
    "amount": "162.00",
    "paidAmount": "62.00",
    "lineItems": [
        {
            "id": "li1",
            "serviceName": "Consultation",
            "quantity": 1,
            "unitPrice": "150.00",
            "lineTotal": "150.00",
        }
    ],
    "client": {"id": "c1", "firstName": "Grace", "lastName": "Hopper", "email": "g@x.y"},
}


@pytest.fixture
def authed_gateway(gateway: ApiGateway) -> ApiGateway:
    gateway.configure_credentials("access-1", "refresh-1")
    return gateway


class TestLeads:
    @pytest.mark.asyncio
    async def test_list_leads(self, authed_gateway: ApiGateway, respx_mock: MockRouter) -> None:
        route = respx_mock.get(f"{BASE_URL}/lead").mock(
            return_value=httpx.Response(200, json=[LEAD])
        )

        leads = await LeadService(authed_gateway).list_leads()

        assert [lead.id for lead in leads] == ["l1"]
        assert leads[0].createdAt is not None
        assert bearer(route.calls[0].request) == "access-1"

    @pytest.mark.asyncio
    async def test_create_lead_omits_unset_fields(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.post(f"{BASE_URL}/lead").mock(
            return_value=httpx.Response(201, json=LEAD)
        )

        lead = await LeadService(authed_gateway).create_lead(
            LeadCreate(
                first_name="Ada", last_name="Lovelace", email="ada@example.com", phone="555-0100"
            )
        )

        assert lead.first_name == "Ada"
        assert body(route.calls[0].request) == {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "phone": "555-0100",
            "pref_contact": "email",
        }

    @pytest.mark.asyncio
    async def test_update_lead_sends_only_set_fields(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.put(f"{BASE_URL}/lead/l1").mock(
            return_value=httpx.Response(200, json={**LEAD, "status": "contacted", "company": None})
        )

        lead = await LeadService(authed_gateway).update_lead(
            "l1", LeadUpdate(status="contacted", company=None)
        )

        assert lead.status == "contacted"
        assert body(route.calls[0].request) == {"status": "contacted", "company": None}

    @pytest.mark.asyncio
    async def test_delete_lead(self, authed_gateway: ApiGateway, respx_mock: MockRouter) -> None:
        route = respx_mock.delete(f"{BASE_URL}/lead/l1").mock(return_value=httpx.Response(204))

        assert await LeadService(authed_gateway).delete_lead("l1") is None
        assert route.called


class TestClients:
    @pytest.mark.asyncio
    async def test_list_clients_accepts_data_wrapper(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        respx_mock.get(f"{BASE_URL}/client").mock(
            return_value=httpx.Response(200, json={"data": [CLIENT]})
        )

        clients = await ClientService(authed_gateway).list_clients()

        assert clients[0].full_name == "Grace Hopper"
        assert clients[0].city == "Arlington"

    @pytest.mark.asyncio
    async def test_unexpected_list_shape_is_logged(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter, caplog
    ) -> None:
        respx_mock.get(f"{BASE_URL}/client").mock(
            return_value=httpx.Response(200, json={"clients": [CLIENT]})
        )

        with caplog.at_level(logging.WARNING, logger="practice_client.domain.common"):
            clients = await ClientService(authed_gateway).list_clients()

        assert clients == []
        assert "Expected a list of Client records" in caplog.text

    @pytest.mark.asyncio
    async def test_update_client(self, authed_gateway: ApiGateway, respx_mock: MockRouter) -> None:
        route = respx_mock.put(f"{BASE_URL}/client/c1").mock(
            return_value=httpx.Response(200, json={**CLIENT, "city": "Boston"})
        )

        client = await ClientService(authed_gateway).update_client("c1", ClientUpdate(city="Boston"))

        assert client.city == "Boston"
        assert body(route.calls[0].request) == {"city": "Boston"}


class TestAppointments:
    @pytest.mark.asyncio
    async def test_available_slots_query(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.get(host=HOST, path="/appointment/available/slots").mock(
            return_value=httpx.Response(
                200,
                json=[{"start": "2024-05-02T09:00:00Z", "end": "2024-05-02T10:00:00Z"}],
            )
        )

        slots = await AppointmentService(authed_gateway).get_available_slots(
            "2024-05-02", "2024-05-03", duration=60
        )

        params = route.calls[0].request.url.params
        assert params["startDate"] == "2024-05-02"
        assert params["endDate"] == "2024-05-03"
        assert params["duration"] == "60"
        assert slots[0].starts == "2024-05-02T09:00:00Z"

    @pytest.mark.asyncio
    async def test_available_slots_without_duration(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.get(host=HOST, path="/appointment/available/slots").mock(
            return_value=httpx.Response(200, json=[])
        )

        await AppointmentService(authed_gateway).get_available_slots("2024-05-02", "2024-05-03")

        assert "duration" not in route.calls[0].request.url.params

    @pytest.mark.asyncio
    async def test_create_appointment_serializes_datetimes(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        start = datetime(2024, 5, 2, 9, 0, tzinfo=timezone.utc)
        end = datetime(2024, 5, 2, 10, 0, tzinfo=timezone.utc)
        route = respx_mock.post(f"{BASE_URL}/appointment").mock(
            return_value=httpx.Response(
                201,
                json={
                    "id": "a1",
                    "clientId": "c1",
                    "startAt": "2024-05-02T09:00:00Z",
                    "endAt": "2024-05-02T10:00:00Z",
                    "status": "tentative",
                    "client": CLIENT,
                },
            )
        )

        appointment = await AppointmentService(authed_gateway).create_appointment(
            AppointmentCreate(clientId="c1", startAt=start, endAt=end)
        )

        sent = body(route.calls[0].request)
        assert sent["clientId"] == "c1"
        assert sent["startAt"].startswith("2024-05-02T09:00:00")
        assert "leadId" not in sent
        assert appointment.client is not None
        assert appointment.client.id == "c1"

    @pytest.mark.asyncio
    async def test_reschedule_and_cancel(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        record = {
            "id": "a1",
            "startAt": "2024-05-03T09:00:00Z",
            "endAt": "2024-05-03T10:00:00Z",
            "status": "confirmed",
        }
        reschedule = respx_mock.put(f"{BASE_URL}/appointment/a1/reschedule").mock(
            return_value=httpx.Response(200, json=record)
        )
        cancel = respx_mock.put(f"{BASE_URL}/appointment/a1/cancel").mock(
            return_value=httpx.Response(200, json={**record, "status": "cancelled"})
        )
        service = AppointmentService(authed_gateway)

        await service.reschedule_appointment("a1", "2024-05-03T09:00:00Z", "2024-05-03T10:00:00Z")
        cancelled = await service.cancel_appointment("a1")

        assert body(reschedule.calls[0].request) == {
            "startAt": "2024-05-03T09:00:00Z",
            "endAt": "2024-05-03T10:00:00Z",
        }
        assert cancel.calls[0].request.content == b""
        assert cancelled.status == "cancelled"


class TestServiceCatalog:
    @pytest.mark.asyncio
    async def test_prices_accept_numbers_and_strings(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        respx_mock.get(f"{BASE_URL}/service").mock(
            return_value=httpx.Response(
                200,
                json=[
                    {"id": "s1", "name": "Consultation", "price": "150.00", "durationMinutes": 60},
                    {"id": "s2", "service": "Follow-up", "price": 75},
                ],
            )
        )

        services = await ServiceCatalog(authed_gateway).list_services()

        assert services[0].price == Decimal("150.00")
        assert services[1].price == Decimal("75")
        assert [s.display_name for s in services] == ["Consultation", "Follow-up"]

    @pytest.mark.asyncio
    async def test_create_service(self, authed_gateway: ApiGateway, respx_mock: MockRouter) -> None:
        route = respx_mock.post(f"{BASE_URL}/service").mock(
            return_value=httpx.Response(201, json={"id": "s3", "service": "Audit", "price": 200})
        )

        service = await ServiceCatalog(authed_gateway).create_service(
            ServiceCreate(service="Audit", price=200)
        )

        assert service.id == "s3"
        assert body(route.calls[0].request) == {"service": "Audit", "price": 200.0}


class TestInvoices:
    @pytest.mark.asyncio
    async def test_get_invoice_parses_money(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        respx_mock.get(f"{BASE_URL}/invoice/i1").mock(return_value=httpx.Response(200, json=INVOICE))

        invoice = await InvoiceService(authed_gateway).get_invoice("i1")

        assert invoice.total == Decimal("162.00")
        assert invoice.balance_due == Decimal("100.00")
        assert invoice.lineItems[0].lineTotal == Decimal("150.00")
        assert invoice.client is not None
        assert invoice.client.firstName == "Grace"

    @pytest.mark.asyncio
    async def test_list_invoices_for_client(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.get(f"{BASE_URL}/invoice/client/c1").mock(
            return_value=httpx.Response(200, json=[INVOICE])
        )

        invoices = await InvoiceService(authed_gateway).list_invoices_for_client("c1")

        assert len(invoices) == 1
        assert route.called

    @pytest.mark.asyncio
    async def test_create_invoice(self, authed_gateway: ApiGateway, respx_mock: MockRouter) -> None:
        route = respx_mock.post(f"{BASE_URL}/invoice").mock(
            return_value=httpx.Response(201, json=INVOICE)
        )

        await InvoiceService(authed_gateway).create_invoice(
            InvoiceCreate(
                clientId="c1",
                lineItems=[InvoiceLineItemCreate(description="Consultation", unitPrice=150)],
                tax=12.5,
            )
        )

        assert body(route.calls[0].request) == {
            "clientId": "c1",
            "lineItems": [{"description": "Consultation", "quantity": 1, "unitPrice": 150.0}],
            "tax": 12.5,
        }

    @pytest.mark.asyncio
    async def test_update_invoice_status(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.put(f"{BASE_URL}/invoice/i1/status").mock(
            return_value=httpx.Response(200, json={**INVOICE, "status": "paid"})
        )

        invoice = await InvoiceService(authed_gateway).update_invoice_status("i1", "paid")

        assert invoice.status == "paid"
        assert body(route.calls[0].request) == {"status": "paid"}

    @pytest.mark.asyncio
    async def test_update_invoice_status_rejects_unknown_status(
        self, authed_gateway: ApiGateway
    ) -> None:
        with pytest.raises(ValueError):
            await InvoiceService(authed_gateway).update_invoice_status("i1", "archived")


class TestPaymentsAndCalendar:
    @pytest.mark.asyncio
    async def test_checkout_session(self, authed_gateway: ApiGateway, respx_mock: MockRouter) -> None:
        route = respx_mock.post(f"{BASE_URL}/stripe/checkout-session/from-invoice").mock(
            return_value=httpx.Response(
                201, json={"sessionId": "cs_1", "url": "https://checkout.stripe.test/cs_1"}
            )
        )

        session = await PaymentService(authed_gateway).create_checkout_session(
            "i1", "https://app.test/ok", "https://app.test/cancel"
        )

        assert session.url == "https://checkout.stripe.test/cs_1"
        assert body(route.calls[0].request) == {
            "invoiceId": "i1",
            "successUrl": "https://app.test/ok",
            "cancelUrl": "https://app.test/cancel",
        }

    @pytest.mark.asyncio
    async def test_sales_statistics_query(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.get(host=HOST, path="/stripe/sales-statistics").mock(
            return_value=httpx.Response(
                200,
                json={
                    "period": "month",
                    "totalRevenue": 1200.5,
                    "totalTransactions": 8,
                    "byCurrency": {"usd": {"amount": 1200.5, "count": 8}},
                },
            )
        )

        stats = await PaymentService(authed_gateway).get_sales_statistics(period="month")

        assert dict(route.calls[0].request.url.params) == {"period": "month"}
        assert stats.totalRevenue == 1200.5
        assert stats.byCurrency["usd"].count == 8

    @pytest.mark.asyncio
    async def test_sales_statistics_without_filters(
        self, authed_gateway: ApiGateway, respx_mock: MockRouter
    ) -> None:
        route = respx_mock.get(f"{BASE_URL}/stripe/sales-statistics").mock(
            return_value=httpx.Response(200, json={})
        )

        stats = await PaymentService(authed_gateway).get_sales_statistics()

        assert route.calls[0].request.url.query == b""
        assert stats.totalRevenue == 0

    @pytest.mark.asyncio
    async def test_calendar_auth(self, authed_gateway: ApiGateway, respx_mock: MockRouter) -> None:
        respx_mock.get(f"{BASE_URL}/calendar/auth/init").mock(
            return_value=httpx.Response(200, json={"authUrl": "https://accounts.test/oauth"})
        )

        auth = await CalendarService(authed_gateway).init_calendar_auth()

        assert auth.authUrl == "https://accounts.test/oauth"
