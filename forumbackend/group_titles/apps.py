# forumbackend/group_titles/apps.py

from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)

class GroupTitlesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'group_titles'
    verbose_name = "群組稱號"

    def ready(self):
        """
        當 Django App 準備就緒時執行。
        在這裡導入 signals，把 receivers 連接上去。
        """
        from . import signals  # noqa: F401
        logger.debug("group_titles signals connected.")
