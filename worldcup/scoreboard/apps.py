from django.apps import AppConfig


class ScoreboardConfig(AppConfig):
    name = 'worldcup.scoreboard'
    verbose_name = 'Live Scoreboard'
