from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("notes", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="AIMetadata",
            fields=[
                ("note", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, primary_key=True, related_name="ai_metadata", serialize=False, to="notes.note")),
                ("embedding", models.JSONField(blank=True, null=True)),
                ("sentiment", models.CharField(blank=True, max_length=32, null=True)),
                ("keywords", models.JSONField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name_plural": "AI metadata",
            },
        ),
    ]
