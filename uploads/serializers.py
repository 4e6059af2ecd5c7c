from rest_framework import serializers


class ImageUploadRequestSerializer(serializers.Serializer):
    images = serializers.ListField(child=serializers.FileField(), help_text="One or more image files")
    product_id = serializers.UUIDField(required=False, help_text="Optional product to associate the images with")


class UploadedImageSerializer(serializers.Serializer):
    filename = serializers.CharField()
    path = serializers.CharField(help_text="Object key in the bucket")
    mimetype = serializers.CharField()
    size = serializers.IntegerField()
    url = serializers.URLField()
    fields = serializers.DictField(required=False)
