from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="DevJournalEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField()),
                ("content", models.TextField(blank=True, null=True)),
                ("mood", models.CharField(blank=True, choices=[("productive", "Productive"), ("learning", "Learning"), ("challenging", "Challenging"), ("frustrated", "Frustrated"), ("excited", "Excited")], max_length=20, null=True)),
                ("tech_used", models.JSONField(blank=True, default=list)),
                ("achievements", models.JSONField(blank=True, default=list)),
                ("blockers", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="journal_entries", to="auth.user")),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("user", "date"), name="uniq_journal_entry_per_day"),
                ],
            },
        ),
    ]
