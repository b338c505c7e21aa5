from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
        ("notes", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ErrorLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("error_text", models.TextField()),
                ("language", models.CharField(blank=True, default="", max_length=50)),
                ("framework", models.CharField(blank=True, max_length=50, null=True)),
                ("ai_explanation", models.TextField(blank=True, default="")),
                ("ai_solution", models.JSONField(blank=True, default=list)),
                ("is_resolved", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("note", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="error_logs", to="notes.note")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="error_logs", to="auth.user")),
            ],
        ),
    ]
