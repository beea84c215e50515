"""Invoice service."""

from invoicing.models.domain import Invoice, InvoiceItem
from invoicing.models.dto import InvoiceDTO
from invoicing.services.base import EntityService


class InvoiceService(EntityService[Invoice, InvoiceDTO]):
    """
    Service for invoices.

    Amount fields are stored as supplied by the client; line totals are
    derived from each item and never stored.
    """

    dto_type = InvoiceDTO

    @staticmethod
    def _to_entity(dto: InvoiceDTO) -> Invoice:
        return Invoice(
            id=dto.id,
            customer_id=dto.customer_id,
            items=[
                InvoiceItem(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price,
                    discount=item.discount,
                )
                for item in dto.items
            ],
            total_amount=dto.total_amount,
            discount=dto.discount,
            tax=dto.tax,
            final_amount=dto.final_amount,
            payment_option=dto.payment_option,
            invoice_date=dto.invoice_date,
        )
