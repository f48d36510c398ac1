"""
Tests for the group title admin screens.
"""

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from group_titles.models import GroupTitleSettings, UserProfile


def message_texts(response):
    return [str(m) for m in get_messages(response.wsgi_request)]


@pytest.mark.django_db
class TestRecalculateAction:

    def test_action_updates_selected_users(self, admin_client, staff_group, mods_group, make_user):
        alice = make_user("alice", trust_level=1, primary_group=staff_group)
        bob = make_user("bob", trust_level=2, primary_group=mods_group, title="Moderator")
        carol = make_user("carol", trust_level=3, primary_group=staff_group)

        config = GroupTitleSettings.get_solo()
        config.enabled = True
        config.rules = "Staff|Jr|Sr|Lead|Chief\nMods|Helper|Moderator"
        config.save()

        response = admin_client.post(reverse('admin:auth_user_changelist'), {
            'action': 'recalculate_group_titles',
            '_selected_action': [alice.pk, bob.pk],
        })

        assert response.status_code == 302
        assert UserProfile.objects.get(user=alice).title == "Jr"
        assert UserProfile.objects.get(user=bob).title == "Moderator"
        assert UserProfile.objects.get(user=carol).title == ""
        assert any("1" in text for text in message_texts(response))

    def test_changelist_shows_title_columns(self, admin_client, title_settings, staff_group, make_user):
        make_user("alice", trust_level=4, primary_group=staff_group)

        response = admin_client.get(reverse('admin:auth_user_changelist'))

        assert response.status_code == 200
        content = response.content.decode()
        assert "Chief" in content
        assert "TL4" in content

    def test_action_reports_failures(self, admin_client, title_settings, staff_group, make_user, monkeypatch):
        alice = make_user("alice", trust_level=1, primary_group=staff_group)

        def broken_update(user):
            raise RuntimeError("write failed")

        monkeypatch.setattr("group_titles.admin.update_user_title", broken_update)
        response = admin_client.post(reverse('admin:auth_user_changelist'), {
            'action': 'recalculate_group_titles',
            '_selected_action': [alice.pk],
        })

        assert response.status_code == 302
        texts = message_texts(response)
        assert any("1 位使用者的稱號更新失敗" in text for text in texts)
        assert any("已更新 0 位" in text for text in texts)


@pytest.mark.django_db
class TestSettingsAdmin:

    def test_malformed_rules_warn_but_are_saved(self, admin_client):
        response = admin_client.post(reverse('admin:group_titles_grouptitlesettings_change'), {
            'enabled': 'on',
            'rules': "Staff\nMods|Helper",
        })

        assert response.status_code == 302
        config = GroupTitleSettings.get_solo()
        assert config.enabled is True
        assert "Staff\r\nMods|Helper" in config.rules or "Staff\nMods|Helper" in config.rules
        assert any("Staff" in text for text in message_texts(response))

    def test_valid_rules_do_not_warn(self, admin_client):
        response = admin_client.post(reverse('admin:group_titles_grouptitlesettings_change'), {
            'rules': "Staff|Jr|Sr",
        })

        assert response.status_code == 302
        assert GroupTitleSettings.get_solo().enabled is False
        assert not any("略過" in text for text in message_texts(response))
