import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group

from group_titles.models import GroupTitleSettings

User = get_user_model()


@pytest.fixture
def title_settings(db):
    config = GroupTitleSettings.get_solo()
    config.enabled = True
    config.rules = "Staff|Jr|Sr|Lead|Chief\nMods|Helper|Moderator\n"
    config.save()
    return config


@pytest.fixture
def staff_group(db):
    return Group.objects.create(name="Staff")


@pytest.fixture
def mods_group(db):
    return Group.objects.create(name="mods")


@pytest.fixture
def make_user(db):
    def _make_user(username="alice", trust_level=0, primary_group=None, title=""):
        user = User.objects.create_user(username=username, password="pw-12345")
        profile = user.profile
        profile.trust_level = trust_level
        profile.primary_group = primary_group
        profile.title = title
        profile.save()
        return User.objects.select_related("profile").get(pk=user.pk)
    return _make_user
