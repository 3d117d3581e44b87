import asyncio
import os
import tempfile
import unittest

from fusion_mcp.core.channel import ResponseChannel
from fusion_mcp.core.errors import ResponseTimeout


class TestResponseChannel(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self._td = tempfile.TemporaryDirectory()
        self.response_path = os.path.join(self._td.name, "fusion_response.txt")
        self.channel = ResponseChannel(self.response_path)

    def tearDown(self):
        self._td.cleanup()

    def _write(self, text):
        with open(self.response_path, "w", encoding="utf-8") as f:
            f.write(text)

    def test_clear_truncates(self):
        self._write('{"status": "success"}')
        self.channel.clear()
        self.assertEqual(os.path.getsize(self.response_path), 0)

    def test_clear_creates_missing_file(self):
        self.channel.clear()
        self.assertTrue(os.path.exists(self.response_path))

    def test_clear_is_best_effort(self):
        channel = ResponseChannel(os.path.join(self._td.name, "missing", "dir", "resp.txt"))
        channel.clear()

    async def test_timeout_after_clear(self):
        self.channel.clear()
        with self.assertRaises(ResponseTimeout) as ctx:
            await self.channel.await_update(timeout=0.5)
        self.assertEqual(ctx.exception.timeout_ms, 500)
        self.assertIn("500ms", ctx.exception.message)

    async def test_missing_file_is_not_ready(self):
        with self.assertRaises(ResponseTimeout):
            await self.channel.await_update(timeout=0.3)

    async def test_whitespace_is_not_ready(self):
        self._write("  \n ")
        with self.assertRaises(ResponseTimeout):
            await self.channel.await_update(timeout=0.3)

    async def test_returns_delayed_content(self):
        self.channel.clear()

        async def late_writer():
            await asyncio.sleep(0.2)
            self._write('  {"status": "success", "result": {"a": 1}}\n')

        writer = asyncio.create_task(late_writer())
        content = await self.channel.await_update(timeout=2.0)
        await writer
        self.assertEqual(content, '{"status": "success", "result": {"a": 1}}')

    async def test_growth_during_settle_waits_for_next_poll(self):
        channel = ResponseChannel(self.response_path, poll_interval=0.05, settle_delay=0.3)
        full = '{"status": "success", "result": {"volume": 30000}}'
        self._write(full[:10])

        async def slow_host():
            # 第一次追加落在首个 settle 窗口内，第二次落在下一个窗口内
            await asyncio.sleep(0.1)
            with open(self.response_path, "a", encoding="utf-8") as f:
                f.write(full[10:25])
            await asyncio.sleep(0.4)
            with open(self.response_path, "a", encoding="utf-8") as f:
                f.write(full[25:])

        host = asyncio.create_task(slow_host())
        content = await channel.await_update(timeout=3.0)
        await host
        self.assertEqual(content, full)

    async def test_non_utf8_content_is_not_ready(self):
        with open(self.response_path, "wb") as f:
            f.write(b'\xff\xfe{"status": "success"}')
        with self.assertRaises(ResponseTimeout):
            await self.channel.await_update(timeout=0.4)

    async def test_non_utf8_then_valid_content(self):
        with open(self.response_path, "wb") as f:
            f.write(b"\xff\xff\xff")

        async def late_writer():
            await asyncio.sleep(0.3)
            self._write('{"status": "success"}')

        writer = asyncio.create_task(late_writer())
        content = await self.channel.await_update(timeout=2.0)
        await writer
        self.assertEqual(content, '{"status": "success"}')

    async def test_cancellation_stops_polling(self):
        self.channel.clear()
        task = asyncio.create_task(self.channel.await_update(timeout=5.0))
        await asyncio.sleep(0.15)
        task.cancel()
        with self.assertRaises(asyncio.CancelledError):
            await task


if __name__ == "__main__":
    unittest.main()
