from django.db.models.signals import m2m_changed, post_delete, post_save
from django.dispatch import receiver

from scores.notifications import group_changes
from teams.models import Group


@receiver(post_save, sender=Group)
def group_saved(sender, instance, **kwargs):
    group_changes.notify(instance.id)


@receiver(post_delete, sender=Group)
def group_deleted(sender, instance, **kwargs):
    group_changes.notify(instance.id)


@receiver(m2m_changed, sender=Group.members.through)
def group_members_changed(sender, instance, action, reverse, pk_set, **kwargs):
    if not action.startswith("post_"):
        return
    if reverse:
        # instance is a Member; pk_set holds the groups it joined or left
        for group_id in pk_set or []:
            group_changes.notify(group_id)
    else:
        group_changes.notify(instance.id)
