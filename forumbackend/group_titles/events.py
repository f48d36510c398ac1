# forumbackend/group_titles/events.py

from django.dispatch import Signal

# Sent whenever a saved profile's trust level changes.
# kwargs: user_id, old_trust_level, new_trust_level
user_promoted = Signal()
