from django.apps import AppConfig


class ScoresConfig(AppConfig):
    name = "scores"
    verbose_name = "Score Entry"

    def ready(self):
        # connects the group change receivers
        from scores import signals  # noqa
