"""
Viewer context for orders.

Describes how the requesting user relates to an order and which actions the
client may offer them.
"""

from typing import List, Optional, Tuple

from marketplace.ordering.domain.models import OrderStatus


BUYER = "buyer"
SELLER = "seller"
BUYER_AND_SELLER = "buyer_and_seller"

ADD_REMARK = "addRemark"
ACCEPT = "accept"
UPDATE_STATUS = "updateStatus"


def _seller_ids(order):
    return {item.seller_id for item in order.items.all()}


def is_order_participant(order, user_id) -> bool:
    return order.buyer_id == user_id or user_id in _seller_ids(order)


def is_order_seller(order, user_id) -> bool:
    return user_id in _seller_ids(order)


def resolve_viewer_context(order, viewer_id) -> Tuple[Optional[str], Optional[List[str]]]:
    """
    Resolve the viewer's role on ``order`` and the actions open to them.

    Returns:
        (viewer_context, allowed_actions); both are None when the viewer is
        neither the buyer nor a seller on the order.
    """
    if viewer_id is None:
        return None, None

    is_buyer = order.buyer_id == viewer_id
    is_seller = viewer_id in _seller_ids(order)

    if is_buyer and is_seller:
        context = BUYER_AND_SELLER
    elif is_buyer:
        context = BUYER
    elif is_seller:
        context = SELLER
    else:
        context = None

    actions = []
    if context:
        actions.append(ADD_REMARK)
    if is_seller:
        if order.status == OrderStatus.RECEIVED:
            actions.append(ACCEPT)
        actions.append(UPDATE_STATUS)

    return context, actions or None


def resolve_seller_viewer_context(order, viewer_id) -> Tuple[Optional[str], Optional[List[str]]]:
    """Seller-console variant: sellers always act as ``seller`` regardless of also being the buyer."""
    if viewer_id is None or not is_order_seller(order, viewer_id):
        return None, None

    actions = [ADD_REMARK]
    if order.status == OrderStatus.RECEIVED:
        actions.append(ACCEPT)
    actions.append(UPDATE_STATUS)
    return SELLER, actions
