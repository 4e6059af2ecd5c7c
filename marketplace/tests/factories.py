import uuid
from decimal import Decimal

import factory
from django.contrib.auth import get_user_model
from faker import Faker

from authentication.models import UserAddress
from marketplace.models import (
    Cart,
    CartItem,
    Order,
    OrderActivity,
    OrderItem,
    OrderStatus,
    Product,
    ProductCategory,
    ProductStatus,
    ProductUnit,
)
from notifications.models import Notification, NotificationType

User = get_user_model()
fake = Faker()


class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = User

    id = factory.LazyFunction(uuid.uuid4)
    email = factory.Sequence(lambda n: f"user_{n}@example.com")
    name = factory.Faker("name")
    password = factory.PostGenerationMethodCall("set_password", "defaultpassword")
    is_active = True
    is_email_verified = True


class SellerFactory(UserFactory):
    email = factory.Sequence(lambda n: f"seller_{n}@example.com")
    bio = factory.Faker("company")
    location = factory.Faker("city")


class UserAddressFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = UserAddress

    user = factory.SubFactory(UserFactory)
    contact_name = factory.Faker("name")
    address_line1 = factory.Faker("street_address")
    city = factory.Faker("city")
    state = "Karnataka"
    pincode = "560001"
    is_default = True


class ProductFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Product

    id = factory.LazyFunction(uuid.uuid4)
    seller = factory.SubFactory(SellerFactory)
    name = factory.Sequence(lambda n: f"Product {n}")
    description = factory.Faker("sentence", nb_words=10)
    categories = factory.LazyFunction(lambda: [ProductCategory.VEGETABLES])
    price = Decimal("10.00")
    quantity = Decimal("25.000")
    unit = ProductUnit.KILOGRAM
    images = factory.LazyFunction(lambda: [fake.image_url()])
    status = ProductStatus.ACTIVE


class InactiveProductFactory(ProductFactory):
    status = ProductStatus.INACTIVE


class CartFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Cart
        django_get_or_create = ("user",)

    user = factory.SubFactory(UserFactory)


class CartItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = CartItem

    cart = factory.SubFactory(CartFactory)
    product = factory.SubFactory(ProductFactory)
    seller = factory.LazyAttribute(lambda o: o.product.seller)
    quantity = 1
    unit_price = factory.LazyAttribute(lambda o: o.product.price)


class OrderFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Order

    buyer = factory.SubFactory(UserFactory)
    status = OrderStatus.RECEIVED
    total_amount = Decimal("0.00")


class OrderItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = OrderItem

    order = factory.SubFactory(OrderFactory)
    product = factory.SubFactory(ProductFactory)
    seller = factory.LazyAttribute(lambda o: o.product.seller)
    quantity = 1
    unit_price = factory.LazyAttribute(lambda o: o.product.price)
    subtotal = factory.LazyAttribute(lambda o: o.unit_price * o.quantity)


class OrderActivityFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = OrderActivity

    order = factory.SubFactory(OrderFactory)
    author = factory.LazyAttribute(lambda o: o.order.buyer)
    message = factory.Faker("sentence", nb_words=8)


class NotificationFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Notification

    user = factory.SubFactory(UserFactory)
    type = NotificationType.ORDER_STATUS
    title = "Order status updated"
    message = factory.Faker("sentence", nb_words=8)
    is_read = False
