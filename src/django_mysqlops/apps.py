from django.apps import AppConfig


class DjangoMysqlOpsConfig(AppConfig):
    name = "django_mysqlops"
    verbose_name = "Django MySQL Ops"
    default_auto_field = "django.db.models.BigAutoField"
