from rest_framework import serializers


def clean_tags(values, lowercase=False):
    """Trim, drop blanks and de-duplicate while keeping first-seen order."""
    cleaned = []
    seen = set()
    for value in values or []:
        tag = str(value).strip()
        if lowercase:
            tag = tag.lower()
        if not tag or tag in seen:
            continue
        seen.add(tag)
        cleaned.append(tag)
    return cleaned


class TagListField(serializers.ListField):
    child = serializers.CharField(allow_blank=True)

    def to_internal_value(self, data):
        return clean_tags(super().to_internal_value(data))

    def to_representation(self, data):
        return clean_tags(data)
