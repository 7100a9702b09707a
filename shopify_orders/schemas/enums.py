"""
Closed enumerations for order status, discount and adjustment values.

A value Shopify adds in a newer API version fails decoding instead of
passing through as an unknown string.
"""

from enum import Enum


class OrderStatus(str, Enum):
    """Order status filter for list and count."""

    OPEN = "open"
    CLOSED = "closed"
    CANCELLED = "cancelled"
    ANY = "any"


class OrderFulfillmentStatus(str, Enum):
    """Fulfillment status filter for list and count."""

    SHIPPED = "shipped"
    PARTIAL = "partial"
    UNSHIPPED = "unshipped"
    ANY = "any"
    # null or partial
    UNFULFILLED = "unfulfilled"
    FULFILLED = "fulfilled"


class OrderFulfillmentState(str, Enum):
    """Fulfillment status returned on an order; null means unfulfilled."""

    FULFILLED = "fulfilled"
    PARTIAL = "partial"
    RESTOCKED = "restocked"


class LineItemFulfillmentState(str, Enum):
    """Fulfillment status returned on a line item; null means unfulfilled."""

    FULFILLED = "fulfilled"
    PARTIAL = "partial"
    NOT_ELIGIBLE = "not_eligible"


class OrderFinancialStatus(str, Enum):
    """Financial status of an order."""

    AUTHORIZED = "authorized"
    PENDING = "pending"
    PAID = "paid"
    PARTIALLY_PAID = "partially_paid"
    REFUNDED = "refunded"
    VOIDED = "voided"
    PARTIALLY_REFUNDED = "partially_refunded"
    ANY = "any"
    # authorized and partially paid
    UNPAID = "unpaid"


class OrderCancelReason(str, Enum):
    CUSTOMER = "customer"
    FRAUD = "fraud"
    INVENTORY = "inventory"
    DECLINED = "declined"
    OTHER = "other"


class DiscountAllocationMethod(str, Enum):
    ACROSS = "across"
    EACH = "each"
    ONE = "one"


class DiscountTargetSelection(str, Enum):
    ALL = "all"
    ENTITLED = "entitled"
    EXPLICIT = "explicit"


class DiscountTargetType(str, Enum):
    LINE_ITEM = "line_item"
    SHIPPING_LINE = "shipping_line"


class DiscountType(str, Enum):
    AUTOMATIC = "automatic"
    DISCOUNT_CODE = "discount_code"
    MANUAL = "manual"
    SCRIPT = "script"


class DiscountValueType(str, Enum):
    FIXED_AMOUNT = "fixed_amount"
    PERCENTAGE = "percentage"


class OrderInventoryBehaviour(str, Enum):
    """How inventory is claimed when an order is created."""

    BYPASS = "bypass"
    DECREMENT_IGNORING_POLICY = "decrement_ignoring_policy"
    DECREMENT_OBEYING_POLICY = "decrement_obeying_policy"


class OrderAdjustmentType(str, Enum):
    SHIPPING_REFUND = "shipping_refund"
    REFUND_DISCREPANCY = "refund_discrepancy"
