from __future__ import annotations

import unittest

from lazylog.ui.flash import Flash, FlashLevel


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


class FlashTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.flash = Flash(duration=2.0, clock=self.clock)

    def test_messages_expire(self) -> None:
        self.flash.info("hi")
        message = self.flash.current()
        assert message is not None
        self.assertEqual((message.level, message.text), (FlashLevel.INFO, "hi"))

        self.clock.now += 2.0
        self.assertIsNone(self.flash.current())

    def test_newer_message_replaces_older(self) -> None:
        self.flash.info("Content copied to clipboard...")
        self.flash.err(RuntimeError("no clipboard tool found"))
        message = self.flash.current()
        assert message is not None
        self.assertIs(message.level, FlashLevel.ERR)
        self.assertEqual(message.text, "no clipboard tool found")

    def test_warn_level(self) -> None:
        self.flash.warn("careful")
        message = self.flash.current()
        assert message is not None
        self.assertEqual((message.level, message.text), (FlashLevel.WARN, "careful"))

    def test_infof_formats(self) -> None:
        self.flash.infof("Log %s saved successfully!", "/tmp/x.log")
        message = self.flash.current()
        assert message is not None
        self.assertEqual(message.text, "Log /tmp/x.log saved successfully!")

    def test_error_without_message_uses_type_name(self) -> None:
        self.flash.err(OSError())
        message = self.flash.current()
        assert message is not None
        self.assertEqual(message.text, "OSError")


if __name__ == "__main__":
    unittest.main()
