from django.contrib import admin

from .models import Cart, CartItem, Order, OrderActivity, OrderItem, OrderStatus, Product, ProductStatus


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('name', 'seller', 'price', 'quantity', 'unit', 'status', 'created_at')
    list_filter = ('status', 'unit', 'created_at')
    search_fields = ('name', 'description', 'seller__email', 'seller__name')
    readonly_fields = ('id', 'created_at', 'updated_at')
    actions = ['activate_products', 'deactivate_products']

    fieldsets = (
        (None, {
            'fields': ('id', 'seller', 'name', 'description', 'categories')
        }),
        ('Pricing & Inventory', {
            'fields': ('price', 'quantity', 'unit')
        }),
        ('Media & Status', {
            'fields': ('images', 'status')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        })
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('seller')

    def activate_products(self, request, queryset):
        queryset.update(status=ProductStatus.ACTIVE)
    activate_products.short_description = "Mark selected products as active"

    def deactivate_products(self, request, queryset):
        queryset.update(status=ProductStatus.INACTIVE)
    deactivate_products.short_description = "Mark selected products as inactive"


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ('product', 'seller', 'quantity', 'unit_price', 'subtotal')


class OrderActivityInline(admin.TabularInline):
    model = OrderActivity
    extra = 0
    readonly_fields = ('author', 'message', 'created_at')


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ('id', 'buyer', 'status', 'total_amount', 'item_count', 'created_at')
    list_filter = ('status', 'created_at')
    search_fields = ('id', 'buyer__email', 'buyer__name')
    readonly_fields = ('id', 'total_amount', 'created_at', 'updated_at')
    inlines = [OrderItemInline, OrderActivityInline]
    actions = ['mark_shipped', 'mark_delivered']

    def item_count(self, obj):
        return obj.items.count()
    item_count.short_description = "Items"

    def mark_shipped(self, request, queryset):
        queryset.update(status=OrderStatus.SHIPPED)
    mark_shipped.short_description = "Mark selected orders as shipped"

    def mark_delivered(self, request, queryset):
        queryset.update(status=OrderStatus.DELIVERED)
    mark_delivered.short_description = "Mark selected orders as delivered"


class CartItemInline(admin.TabularInline):
    model = CartItem
    extra = 0
    readonly_fields = ('product', 'seller', 'quantity', 'unit_price', 'created_at')


@admin.register(Cart)
class CartAdmin(admin.ModelAdmin):
    list_display = ('user', 'line_count', 'created_at', 'updated_at')
    search_fields = ('user__email',)
    inlines = [CartItemInline]

    def line_count(self, obj):
        return obj.items.count()
    line_count.short_description = "Lines"
