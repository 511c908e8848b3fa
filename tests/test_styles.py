"""Skin selection and broadcast listener registry."""

from __future__ import annotations

import unittest
from collections.abc import Callable

from lazylog.styles import (
    DEFAULT_SKIN,
    OCEAN_SKIN,
    PLAIN_SKIN,
    Styles,
    available_skin_names,
    normalize_skin_name,
    resolve_skin,
)


class CountingListener:
    def __init__(self) -> None:
        self.calls = 0

    def styles_changed(self, styles: Styles) -> None:
        self.calls += 1


class SkinResolutionTests(unittest.TestCase):
    def test_unknown_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_skin_name(None), "default")
        self.assertEqual(normalize_skin_name("  "), "default")
        self.assertEqual(normalize_skin_name("nope"), "default")
        self.assertEqual(normalize_skin_name(" Ocean "), "ocean")

    def test_no_color_always_resolves_plain(self) -> None:
        self.assertIs(resolve_skin("ocean", no_color=True), PLAIN_SKIN)
        self.assertIs(resolve_skin("ocean"), OCEAN_SKIN)
        self.assertIs(resolve_skin(None), DEFAULT_SKIN)

    def test_plain_is_not_selectable(self) -> None:
        self.assertEqual(available_skin_names(), ("default", "ocean"))


class StylesRegistryTests(unittest.TestCase):
    def test_broadcast_reaches_each_listener_once(self) -> None:
        styles = Styles()
        listener = CountingListener()
        styles.add_listener(listener)
        styles.add_listener(listener)

        styles.set_skin(OCEAN_SKIN)

        self.assertEqual(listener.calls, 1)
        self.assertEqual(styles.bg_color(), OCEAN_SKIN.bg)
        self.assertEqual(styles.border_focus_color(), OCEAN_SKIN.border_focus)

    def test_removed_listener_is_not_notified(self) -> None:
        styles = Styles()
        listener = CountingListener()
        styles.add_listener(listener)
        styles.remove_listener(listener)
        styles.remove_listener(listener)

        styles.set_skin(OCEAN_SKIN)

        self.assertEqual(listener.calls, 0)
        self.assertEqual(styles.listener_count(), 0)

    def test_dispatch_defers_notifications(self) -> None:
        queued: list[Callable[[], None]] = []
        styles = Styles(dispatch=queued.append)
        listener = CountingListener()
        styles.add_listener(listener)

        styles.set_skin(OCEAN_SKIN)
        self.assertEqual(listener.calls, 0)
        self.assertEqual(len(queued), 1)

        queued.pop()()
        self.assertEqual(listener.calls, 1)

    def test_queued_notification_skips_listener_removed_meanwhile(self) -> None:
        queued: list[Callable[[], None]] = []
        styles = Styles(dispatch=queued.append)
        listener = CountingListener()
        styles.add_listener(listener)

        styles.set_skin(OCEAN_SKIN)
        styles.remove_listener(listener)
        queued.pop()()

        self.assertEqual(listener.calls, 0)


if __name__ == "__main__":
    unittest.main()
