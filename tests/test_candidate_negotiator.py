import unittest

from fakes import FakeModelClient
from translator.candidate_negotiator import (
    CandidateNegotiator,
    TranslationRequest,
    TranslationResult,
)
from translator.exceptions import InvalidRequestError, MalformedReplyError, TransportError


class TestCandidateNegotiator(unittest.IsolatedAsyncioTestCase):
    def make_negotiator(self, replies):
        self.client = FakeModelClient(replies)
        return CandidateNegotiator(self.client, link="localhost:11434")

    async def test_first_candidate_accepted(self):
        negotiator = self.make_negotiator(["<think>ok</think>\n你好，世界"])
        result = await negotiator.negotiate(
            TranslationRequest(text="Hello world", destination=["中文(简体)", "日语"])
        )
        self.assertEqual(result.target, "中文(简体)")
        self.assertEqual(result.result, ["你好，世界"])
        self.assertEqual(result.link, "localhost:11434")
        self.assertEqual(
            self.client.prompts,
            ["Translate the following text to 中文(简体):\n\nHello world"],
        )

    async def test_detected_source_is_skipped_without_model_call(self):
        negotiator = self.make_negotiator([])
        result = await negotiator.negotiate(
            TranslationRequest(text="Hello world", destination=["英语"])
        )
        self.assertEqual(
            result.to_dict(),
            {
                "text": "Hello world",
                "from": "",
                "to": "",
                "link": "",
                "result": ["Hello world"],
            },
        )
        self.assertEqual(self.client.prompts, [])

    async def test_declared_source_is_skipped(self):
        negotiator = self.make_negotiator(["Hallo Welt"])
        result = await negotiator.negotiate(
            TranslationRequest(
                text="Hello world", destination=["英语", "德语"], source="英语"
            )
        )
        self.assertEqual(result.source, "英语")
        self.assertEqual(result.target, "德语")
        self.assertEqual(
            self.client.prompts,
            ["Translate the following text from 英语 to 德语:\n\nHello world"],
        )

    async def test_declared_source_disables_detection(self):
        # 声明了源语种时不再用检测结果判断跳过
        negotiator = self.make_negotiator(["Hello world, rephrased"])
        result = await negotiator.negotiate(
            TranslationRequest(text="Hello world", destination=["英语"], source="法语")
        )
        self.assertEqual(result.target, "英语")
        self.assertEqual(len(self.client.prompts), 1)

    async def test_echo_falls_through_to_next_candidate(self):
        negotiator = self.make_negotiator(["  Hello world  ", "こんにちは世界"])
        result = await negotiator.negotiate(
            TranslationRequest(text=" Hello world\n", destination=["A", "B"])
        )
        self.assertEqual(result.target, "B")
        self.assertEqual(result.result, ["こんにちは世界"])
        self.assertEqual(len(self.client.prompts), 2)

    async def test_multiline_echo_is_rejected(self):
        # 各行拼接后与原文相同，同样视为原样返回
        negotiator = self.make_negotiator(["line one\nline two"])
        result = await negotiator.negotiate(
            TranslationRequest(text="line oneline two", destination=["A"])
        )
        self.assertEqual(result.target, "")
        self.assertEqual(result.result, ["line oneline two"])

    async def test_empty_reply_falls_through(self):
        negotiator = self.make_negotiator(["<think>\nno idea\n</think>\n", "Bonjour"])
        result = await negotiator.negotiate(
            TranslationRequest(text="Hello", destination=["A", "法语"])
        )
        self.assertEqual(result.target, "法语")
        self.assertEqual(result.result, ["Bonjour"])

    async def test_exhausted(self):
        negotiator = self.make_negotiator(["Hello"])
        result = await negotiator.negotiate(
            TranslationRequest(text="Hello", destination=["A"], source="auto")
        )
        self.assertEqual(result.source, "auto")
        self.assertEqual(result.target, "")
        self.assertEqual(result.link, "")
        self.assertEqual(result.result, ["Hello"])

    async def test_candidates_tried_in_order_once_each(self):
        negotiator = self.make_negotiator(["x", "", "y"])
        await negotiator.negotiate(
            TranslationRequest(text="x", destination=["A", "B", "C", "D"])
        )
        self.assertEqual(
            [prompt.split(":")[0] for prompt in self.client.prompts],
            [
                "Translate the following text to A",
                "Translate the following text to B",
                "Translate the following text to C",
            ],
        )

    async def test_empty_destination_rejected_before_model_call(self):
        negotiator = self.make_negotiator([])
        with self.assertRaises(InvalidRequestError):
            await negotiator.negotiate(TranslationRequest(text="Hello", destination=[]))
        self.assertEqual(self.client.prompts, [])

    async def test_transport_error_does_not_fall_back(self):
        negotiator = self.make_negotiator([TransportError(), "Bonjour"])
        with self.assertRaises(TransportError):
            await negotiator.negotiate(
                TranslationRequest(text="Hello", destination=["A", "B"])
            )
        self.assertEqual(len(self.client.prompts), 1)

    async def test_malformed_reply_does_not_fall_back(self):
        negotiator = self.make_negotiator(["Hello", MalformedReplyError(), "Bonjour"])
        with self.assertRaises(MalformedReplyError):
            await negotiator.negotiate(
                TranslationRequest(text="Hello", destination=["A", "B", "C"])
            )
        self.assertEqual(len(self.client.prompts), 2)


class TestTranslationResult(unittest.TestCase):
    def test_to_dict_uses_wire_names(self):
        result = TranslationResult(
            text="Hello", source="英语", target="日语", link="l", result=["こんにちは"]
        )
        self.assertEqual(
            result.to_dict(),
            {
                "text": "Hello",
                "from": "英语",
                "to": "日语",
                "link": "l",
                "result": ["こんにちは"],
            },
        )


if __name__ == "__main__":
    unittest.main()
