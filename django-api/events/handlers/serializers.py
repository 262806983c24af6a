"""Serializers for transforming requests and domain models.

Input serializers only check the *shape* of a request (strings and lists of
strings). Whether a value is acceptable is decided by the service layer.
"""

import json
import re

from rest_framework import serializers
from rest_framework.fields import empty
from rest_framework.utils import html

_JSON_ARRAY = re.compile(r"\[[\s\S]*\]")


class StringListField(serializers.Field):
    """A list of strings, also accepted as a JSON-encoded string.

    Multipart clients send ``agenda`` and ``tags`` as JSON text; an
    unparseable value is read as an empty list.
    """

    default_error_messages = {
        "invalid": "Expected a list of strings.",
    }

    def get_value(self, dictionary):
        if html.is_html_input(dictionary):
            if self.field_name not in dictionary:
                return empty
            values = dictionary.getlist(self.field_name)
            return values[0] if len(values) == 1 else values
        return dictionary.get(self.field_name, empty)

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = _parse_json_array(data)
        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            self.fail("invalid")
        return data

    def to_representation(self, value):
        return list(value)


def _parse_json_array(text: str) -> list:
    if not text:
        return []
    try:
        return json.loads(text)
    except ValueError:
        match = _JSON_ARRAY.search(text)
        if match:
            try:
                return json.loads(match.group(0))
            except ValueError:
                return []
        return []


class EventInputSerializer(serializers.Serializer):
    """Raw event fields as submitted by a client."""

    title = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    overview = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    image = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    venue = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    location = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    date = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    time = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    mode = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    audience = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    agenda = StringListField(required=False)
    organizer = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    tags = StringListField(required=False)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField(source="id.value")
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    overview = serializers.CharField()
    image = serializers.CharField()
    venue = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    mode = serializers.CharField(source="mode.value")
    audience = serializers.CharField()
    agenda = StringListField()
    organizer = serializers.CharField()
    tags = StringListField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")
