import json
import unittest

from fusion_mcp.core.envelopes import CommandEnvelope, ResponseEnvelope
from fusion_mcp.core.errors import MalformedResponse


class TestCommandEnvelope(unittest.TestCase):
    def test_serializes_three_fields(self):
        env = CommandEnvelope(command="create_box", parameters={"width": 10, "body_name": "箱"})
        data = json.loads(env.to_json())
        self.assertEqual(set(data), {"command", "parameters", "timestamp"})
        self.assertEqual(data["parameters"]["body_name"], "箱")
        self.assertIn("箱", env.to_json())

    def test_timestamp_is_utc_iso(self):
        env = CommandEnvelope(command="select_all_bodies")
        self.assertTrue(env.timestamp.endswith("Z"))
        self.assertRegex(env.timestamp, r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestResponseEnvelope(unittest.TestCase):
    def test_success(self):
        resp = ResponseEnvelope.parse('{"status": "success", "result": {"a": 1}}')
        self.assertFalse(resp.is_error)
        self.assertEqual(resp.result, {"a": 1})

    def test_error_keeps_message_and_traceback(self):
        resp = ResponseEnvelope.parse(
            json.dumps({"status": "error", "message": "boom", "traceback": "line 1"})
        )
        self.assertTrue(resp.is_error)
        self.assertEqual(resp.message, "boom")
        self.assertEqual(resp.traceback, "line 1")

    def test_invalid_json(self):
        with self.assertRaises(MalformedResponse) as ctx:
            ResponseEnvelope.parse("{not json")
        self.assertEqual(ctx.exception.raw, "{not json")

    def test_unexpected_shapes(self):
        for text in ['[1, 2]', '"ok"', '{"result": 1}', '{"status": "done"}',
                     '{"status": "error", "message": 5}']:
            with self.subTest(text=text):
                with self.assertRaises(MalformedResponse):
                    ResponseEnvelope.parse(text)


if __name__ == "__main__":
    unittest.main()
