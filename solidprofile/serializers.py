from rest_framework import serializers


class ResolvedProfileSerializer(serializers.Serializer):
    webId = serializers.CharField(source="web_id")
    name = serializers.CharField()
    fn = serializers.CharField()
    preferences = serializers.CharField()
    publicTypeIndex = serializers.CharField(source="public_type_index")
    privateTypeIndex = serializers.CharField(source="private_type_index")
    storage = serializers.CharField()
