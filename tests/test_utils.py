import pytest
from django.contrib.auth import get_user_model

from group_titles.models import GroupTitleSettings, UserProfile
from group_titles.resolver import UserTitleContext
from group_titles.utils import build_title_context, find_user, update_user_title

User = get_user_model()


@pytest.mark.django_db
def test_build_title_context_from_profile(staff_group, make_user):
    user = make_user(trust_level=3, primary_group=staff_group, title="Old")

    assert build_title_context(user) == UserTitleContext(
        primary_group_name="Staff", trust_level=3, current_title="Old",
    )


@pytest.mark.django_db
def test_build_title_context_without_profile():
    user = User.objects.create_user(username="ghost", password="pw-12345")
    UserProfile.objects.filter(user=user).delete()

    assert build_title_context(find_user(user.pk)) is None
    assert build_title_context(None) is None
    assert update_user_title(None) is None


@pytest.mark.django_db
def test_find_user_missing():
    assert find_user(424242) is None
    assert find_user(None) is None


@pytest.mark.django_db
def test_update_user_title_is_idempotent(staff_group, make_user):
    user = make_user(trust_level=2, primary_group=staff_group)
    config = GroupTitleSettings.get_solo()
    config.enabled = True
    config.rules = "Staff|Jr|Sr"
    config.save()

    assert update_user_title(user) == "Sr"
    assert update_user_title(user) is None
    assert UserProfile.objects.get(user=user).title == "Sr"


@pytest.mark.django_db
def test_settings_rule_set_parses_lines():
    config = GroupTitleSettings.get_solo()
    config.rules = "Staff|Jr\n\nMods|Helper"
    config.save()

    assert [rule.group_name for rule in GroupTitleSettings.get_solo().rule_set()] == ["Staff", "Mods"]
