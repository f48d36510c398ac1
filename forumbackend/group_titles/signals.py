# forumbackend/group_titles/signals.py

from django.db.models.signals import pre_save, post_save, m2m_changed
from django.dispatch import receiver
from django.conf import settings
from django.contrib.auth import get_user_model
import logging

from .events import user_promoted
from .models import UserProfile
from .utils import find_user, update_user_title

logger = logging.getLogger(__name__)
User = get_user_model()


def _safe_update_user_title(user_id, source, group_id=None):
    # 單一使用者失敗不能中斷主程式的儲存流程
    try:
        user = find_user(user_id)
        if user is None:
            logger.debug(f"[{source}][signals.py] User {user_id} not found, skipping.")
            return None
        if group_id is not None:
            profile = getattr(user, 'profile', None)
            if profile is None or profile.primary_group_id != group_id:
                return None
        return update_user_title(user)
    except Exception as e:
        logger.error(f"[{source}][signals.py] Error updating group title for user {user_id}: {e}", exc_info=True)
        return None


# --- Signal Handlers ---

# 1. 自動創建 UserProfile
@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        UserProfile.objects.get_or_create(user=instance)
        logger.info(f"UserProfile created for {instance.username}")


# 2. 記錄儲存前的主要群組與信任等級
@receiver(pre_save, sender=UserProfile)
def remember_profile_state(sender, instance, **kwargs):
    original = None
    if instance.pk:
        original = sender.objects.filter(pk=instance.pk).values('primary_group_id', 'trust_level').first()
    instance._stored_state = original


# 3. user_updated / user_promoted
@receiver(post_save, sender=UserProfile)
def handle_profile_saved(sender, instance, created, **kwargs):
    original = getattr(instance, '_stored_state', None)
    instance._stored_state = None

    if original is None:
        primary_group_changed = instance.primary_group_id is not None
        old_trust_level = None
        trust_level_changed = False
    else:
        primary_group_changed = original['primary_group_id'] != instance.primary_group_id
        old_trust_level = original['trust_level']
        trust_level_changed = old_trust_level != instance.trust_level

    if trust_level_changed:
        logger.info(f"[POST_SAVE][signals.py] User {instance.user_id}: trust level {old_trust_level} -> {instance.trust_level}.")
        user_promoted.send(
            sender=sender,
            user_id=instance.user_id,
            old_trust_level=old_trust_level,
            new_trust_level=instance.trust_level,
        )

    if primary_group_changed:
        logger.info(f"[POST_SAVE][signals.py] User {instance.user_id}: primary group changed to {instance.primary_group_id}.")
        # 重新讀取，user_promoted 可能已經寫入新稱號
        _safe_update_user_title(instance.user_id, 'USER_UPDATED')


# 4. 信任等級變更
@receiver(user_promoted)
def handle_user_promoted(sender, user_id=None, **kwargs):
    _safe_update_user_title(user_id, 'USER_PROMOTED')


# 5. 加入群組 (user.groups.add / group.user_set.add 兩個方向)
@receiver(m2m_changed, sender=User.groups.through)
def handle_group_user_created(sender, instance, action, reverse, pk_set, **kwargs):
    if action != 'post_add' or not pk_set:
        return

    if reverse:
        # instance 是 Group，pk_set 是 user ids
        pairs = [(user_id, instance.pk) for user_id in pk_set]
    else:
        pairs = [(instance.pk, group_id) for group_id in pk_set]

    for user_id, group_id in pairs:
        _safe_update_user_title(user_id, 'GROUP_USER_CREATED', group_id=group_id)
