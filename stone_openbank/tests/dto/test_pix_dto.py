"""
Implements tests for the PIX wire models.
"""
# built-in
from copy import deepcopy
from datetime import datetime, timezone
from unittest import TestCase

# third
from pydantic import ValidationError

# local
from stone_openbank.common.enums import PixPaymentStatus
from stone_openbank.dto.pix import (
    AllPixEntries,
    ConfirmPendingPaymentInput,
    CreateDynamicQRCodeInput,
    CreatePendingPaymentInput,
    GetQRCodeInput,
    PendingPaymentOutput,
    PIXInvoiceOutput,
    PIXOutboundOutput,
    QRCode,
    TargetOrSourceAccount,
)
from stone_openbank.tests.base_test import (
    DYNAMIC_QRCODE,
    OUTBOUND_PIX,
    PARTY,
    PENDING_PAYMENT,
    PIX_ENTRIES,
    PIX_INVOICE,
    STATIC_QRCODE,
)


class TestPendingPaymentOutput(TestCase):
    def setUp(self):
        self.data = deepcopy(PENDING_PAYMENT)

    def test_decodes_every_field(self):
        payment = PendingPaymentOutput.model_validate(self.data)

        self.assertEqual(self.data['id'], payment.id)
        self.assertEqual(1000, payment.amount)
        self.assertEqual(
            datetime(2021, 3, 2, 18, 2, 1, tzinfo=timezone.utc), payment.created_at
        )
        self.assertEqual(PixPaymentStatus.CREATED.value, payment.status)
        self.assertEqual('E16501555202103021802abcdef12345', payment.end_to_end_id)
        self.assertEqual('16501555', payment.source.institution.ispb)
        self.assertEqual('Maria da Silva', payment.target.entity.name)
        self.assertEqual('0001', payment.target.account.branch_code)

    def test_null_fields_decode_to_none(self):
        payment = PendingPaymentOutput.model_validate(self.data)

        self.assertIsNone(payment.failed_at)
        self.assertIsNone(payment.failure_reason_code)
        self.assertIsNone(payment.failure_reason_description)
        self.assertIsNone(payment.money_reserved_at)
        self.assertIsNone(payment.settled_at)

    def test_zero_refund_is_not_absent(self):
        payment = PendingPaymentOutput.model_validate(self.data)
        self.assertEqual(0, payment.refunded_amount)

        self.data['refunded_amount'] = None
        payment = PendingPaymentOutput.model_validate(self.data)
        self.assertIsNone(payment.refunded_amount)

    def test_settled_payment_timestamps(self):
        self.data['status'] = PixPaymentStatus.SETTLED.value
        self.data['money_reserved_at'] = '2021-03-02T18:02:02Z'
        self.data['settled_at'] = '2021-03-02T18:02:03Z'

        payment = PendingPaymentOutput.model_validate(self.data)

        self.assertEqual(3, payment.settled_at.second)
        self.assertEqual(2, payment.money_reserved_at.second)

    def test_unknown_status_is_accepted(self):
        self.data['status'] = 'SOMETHING_NEW'

        payment = PendingPaymentOutput.model_validate(self.data)

        self.assertEqual('SOMETHING_NEW', payment.status)

    def test_unknown_fields_are_ignored(self):
        self.data['brand_new_field'] = {'nested': True}

        payment = PendingPaymentOutput.model_validate(self.data)

        self.assertFalse(hasattr(payment, 'brand_new_field'))

    def test_missing_required_field(self):
        self.data.pop('id')

        with self.assertRaises(ValidationError):
            PendingPaymentOutput.model_validate(self.data)


class TestPIXOutboundOutput(TestCase):
    def test_timestamps_are_kept_as_received(self):
        pix = PIXOutboundOutput.model_validate(OUTBOUND_PIX)

        self.assertEqual('2021-03-02T18:02:01Z', pix.created_at)
        self.assertEqual('2021-03-02 18:02:02', pix.money_reserved_at)
        self.assertEqual('2021-03-02T18:02:03Z', pix.settled_at)
        self.assertIsNone(pix.failed_at)

    def test_decodes_outbound_only_fields(self):
        pix = PIXOutboundOutput.model_validate(OUTBOUND_PIX)

        self.assertEqual(0, pix.fee)
        self.assertEqual('user:456', pix.approved_by)
        self.assertEqual('2021-03-02T18:02:02Z', pix.approved_at)
        self.assertEqual(TargetOrSourceAccount.model_validate(PARTY), pix.source)


class TestPIXInvoiceOutput(TestCase):
    def test_decodes_every_field(self):
        invoice = PIXInvoiceOutput.model_validate(PIX_INVOICE)

        self.assertEqual('inv-001', invoice.id)
        self.assertEqual(1050, invoice.amount)
        self.assertEqual('random_key', invoice.key_type)
        self.assertEqual('16501555', invoice.participant_ispb)
        self.assertIsInstance(invoice.created_at, datetime)
        self.assertIsInstance(invoice.updated_at, datetime)
        self.assertIsNone(invoice.additional_information)
        self.assertTrue(invoice.qr_code_content.startswith('000201'))
        self.assertTrue(invoice.qr_code_image.startswith('data:image/png'))


class TestQRCode(TestCase):
    def test_static_payload(self):
        qrcode = QRCode.model_validate(STATIC_QRCODE)

        self.assertTrue(qrcode.is_static)
        self.assertFalse(qrcode.is_dynamic)
        self.assertIsNone(qrcode.dynamic)
        self.assertEqual('+5511999999999', qrcode.static.key)
        self.assertEqual('phone', qrcode.static.type)
        self.assertEqual(500, qrcode.static.amount)

    def test_dynamic_payload(self):
        qrcode = QRCode.model_validate(DYNAMIC_QRCODE)

        self.assertTrue(qrcode.is_dynamic)
        self.assertIsNone(qrcode.static)
        self.assertEqual(3600, qrcode.dynamic.expiration)
        self.assertEqual(2, qrcode.dynamic.revision)
        self.assertEqual('Pedido 42', qrcode.dynamic.request_for_payer)
        self.assertEqual('cpf', qrcode.dynamic.customer.document_type)
        self.assertEqual('2021-03-02T18:03:00Z', qrcode.dynamic.requested_at)

    def test_payload_not_matching_type_is_dropped(self):
        data = deepcopy(STATIC_QRCODE)
        data['dynamic'] = deepcopy(DYNAMIC_QRCODE['dynamic'])

        qrcode = QRCode.model_validate(data)

        self.assertIsNone(qrcode.dynamic)
        self.assertIsNotNone(qrcode.static)

    def test_unknown_type_keeps_both_payloads(self):
        data = {
            'type': 'composite',
            'static': deepcopy(STATIC_QRCODE['static']),
            'dynamic': deepcopy(DYNAMIC_QRCODE['dynamic']),
        }

        qrcode = QRCode.model_validate(data)

        self.assertIsNotNone(qrcode.static)
        self.assertIsNotNone(qrcode.dynamic)


class TestAllPixEntries(TestCase):
    def test_decodes_entries(self):
        entries = AllPixEntries.model_validate(PIX_ENTRIES)

        self.assertEqual({}, entries.cursor)
        entry = entries.data[0]
        self.assertEqual('entry-001', entry.id)
        self.assertEqual('active', entry.key_status)
        self.assertEqual(
            datetime(2020, 11, 16, 10, tzinfo=timezone.utc),
            entry.beneficiary_account.created_at,
        )
        self.assertEqual('12345678900', entry.beneficiary_entity.document)

    def test_string_cursor_and_empty_listing(self):
        entries = AllPixEntries.model_validate({'cursor': 'opaque-token'})

        self.assertEqual('opaque-token', entries.cursor)
        self.assertEqual([], entries.data)


class TestRequestModels(TestCase):
    def test_pending_payment_input_omits_unset_fields(self):
        payment = CreatePendingPaymentInput(amount=1000, key='+5511999999999')

        self.assertEqual({'amount': 1000, 'key': '+5511999999999'}, payment.to_dict())

    def test_pending_payment_input_with_source(self):
        payment = CreatePendingPaymentInput(
            amount=1000, source=TargetOrSourceAccount.model_validate(PARTY)
        )

        self.assertEqual(PARTY, payment.to_dict()['source'])

    def test_confirm_input_sends_falsy_values(self):
        confirm = ConfirmPendingPaymentInput(amount=0)

        self.assertEqual(
            {'amount': 0, 'description': '', 'add_target_to_contacts': False},
            confirm.to_dict(),
        )

    def test_qrcode_input_uses_wire_name_for_date(self):
        lookup = GetQRCodeInput(brcode='000201', date='2021-03-02')

        self.assertEqual(
            {'brcode': '000201', 'payment_date': '2021-03-02'}, lookup.to_dict()
        )

    def test_dynamic_qrcode_input_requires_core_fields(self):
        with self.assertRaises(ValidationError) as ctx:
            CreateDynamicQRCodeInput(amount='10.50', account_id='acc-1', key='k-1')

        self.assertEqual(('transaction_id',), ctx.exception.errors()[0]['loc'])

    def test_dynamic_qrcode_input_omits_unset_optional_fields(self):
        invoice = CreateDynamicQRCodeInput(
            amount='10.50', account_id='acc-1', key='k-1', transaction_id='tx-1'
        )

        self.assertEqual(
            {
                'amount': '10.50',
                'account_id': 'acc-1',
                'key': 'k-1',
                'transaction_id': 'tx-1',
            },
            invoice.to_dict(),
        )
