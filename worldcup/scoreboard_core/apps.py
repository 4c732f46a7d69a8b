from django.apps import AppConfig


class ScoreboardCoreConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'worldcup.scoreboard_core'
    verbose_name = 'Scoreboard Core Logic'
