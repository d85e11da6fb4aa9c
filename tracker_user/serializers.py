from rest_framework import serializers
from .models import Person

class PersonSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Person
        fields = ['id', 'name', 'email', 'role', 'createdAt', 'updatedAt']

class PersonSummarySerializer(serializers.ModelSerializer):
    # Shape used for assignee dropdowns and task lists
    class Meta:
        model = Person
        fields = ['id', 'name', 'role']

class PersonContactSerializer(serializers.ModelSerializer):
    class Meta:
        model = Person
        fields = ['id', 'name', 'email', 'role']
