from rest_framework import ISO_8601, serializers
from tracker_user.models import Person
from tracker_user.serializers import PersonContactSerializer, PersonSummarySerializer
from .models import Task

class TaskSerializer(serializers.ModelSerializer):
    """
    Task in its wire shape. ``assignedTo`` is written as a person id and read
    back populated; pass ``assignee='contact'`` in the context to include the
    assignee's email as well.
    """
    assignedTo = serializers.PrimaryKeyRelatedField(
        source='assigned_to',
        queryset=Person.objects.all()
    )
    description = serializers.CharField(required=False, allow_blank=True, default='')
    # Date-only input, as sent by a plain date picker, means midnight UTC
    deadline = serializers.DateTimeField(input_formats=[ISO_8601, '%Y-%m-%d'])
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Task
        fields = ['id', 'title', 'description', 'assignedTo', 'deadline', 'status', 'progress', 'createdAt', 'updatedAt']

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data['assignedTo'] = self._assignee(instance)
        return data

    def _assignee(self, instance):
        serializer_class = PersonContactSerializer if self.context.get('assignee') == 'contact' else PersonSummarySerializer
        try:
            person = instance.assigned_to
        except Person.DoesNotExist:
            person = None
        if person is None:
            return None
        return serializer_class(person).data

class ScoredTaskSerializer(TaskSerializer):
    riskScore = serializers.SerializerMethodField()

    class Meta(TaskSerializer.Meta):
        fields = TaskSerializer.Meta.fields + ['riskScore']

    def get_riskScore(self, instance):
        return self.context['scores'][instance.pk]
