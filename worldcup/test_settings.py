"""
Test settings - forces DEBUG off and keeps scoreboard logging quiet
"""
from .settings import *

DEBUG = False

LOGGING["loggers"]["worldcup"]["level"] = "WARNING"
