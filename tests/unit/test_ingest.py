"""Unit tests for decoders and the input combiner."""

import pytest
from prompt_refiner.errors import DecodingFailure
from prompt_refiner.ingest import (
    RawInput,
    DecodedInput,
    BaseDecoder,
    TextDecoder,
    PrecomputedDecoder,
    DecoderRegistry,
    create_registry,
    CombinedInput,
    combine_inputs,
)


class TestRawInput:
    """Tests for RawInput.from_dict."""

    def test_text_input(self):
        raw = RawInput.from_dict({"type": "Text", "content": "Build a shop"})
        assert raw.type == "text"
        assert raw.content == "Build a shop"

    def test_image_fields_move_into_data(self):
        raw = RawInput.from_dict({
            "type": "image",
            "path": "screens/home.png",
            "ocrText": "Modern grid",
            "dominantColors": [{"channel": "r", "mean": 10}],
        })
        assert raw.content is None
        assert raw.path == "screens/home.png"
        assert raw.data["ocrText"] == "Modern grid"
        assert raw.data["dominantColors"] == [{"channel": "r", "mean": 10}]

    def test_document_content_moves_into_data(self):
        raw = RawInput.from_dict({"type": "pdf", "content": "Phase 1: design"})
        assert raw.content is None
        assert raw.data == {"content": "Phase 1: design"}


class TestTextDecoder:
    """Tests for TextDecoder."""

    @pytest.fixture
    def decoder(self):
        return TextDecoder()

    def test_content_is_trimmed(self, decoder):
        decoded = decoder.decode(RawInput(type="text", content="  Build a shop app  "))
        assert decoded.kind == "text"
        assert decoded.text == "Build a shop app"
        assert decoded.word_count == 4

    @pytest.mark.parametrize("content", [None, ""])
    def test_missing_content_fails(self, decoder, content):
        with pytest.raises(DecodingFailure) as exc_info:
            decoder.decode(RawInput(type="text", content=content))
        assert exc_info.value.kind == "text"
        assert str(exc_info.value) == "text processing error: Invalid text content"


class TestPrecomputedDecoder:
    """Tests for PrecomputedDecoder."""

    def test_image_payload(self):
        decoder = PrecomputedDecoder("image")
        decoded = decoder.decode(RawInput(type="image", path="a.png", data={
            "ocrText": "  Minimal dashboard  ",
            "dominantColors": [
                {"channel": "r", "mean": 12.4},
                {"channel": "g", "mean": 100},
                {"channel": "b", "mean": 200.6},
            ],
        }))
        assert decoded.text == "Minimal dashboard"
        assert decoded.ocr_text == "Minimal dashboard"
        assert decoded.path == "a.png"
        assert [c["mean"] for c in decoded.dominant_colors] == [12.4, 100.0, 200.6]
        assert not decoded.is_document

    def test_image_without_ocr_text_fails(self):
        with pytest.raises(DecodingFailure) as exc_info:
            PrecomputedDecoder("image").decode(RawInput(type="image"))
        assert exc_info.value.kind == "image"
        assert "missing OCR text" in str(exc_info.value)

    def test_invalid_color_entry_fails(self):
        raw = RawInput(type="image", data={"ocrText": "", "dominantColors": [{"channel": "r"}]})
        with pytest.raises(DecodingFailure):
            PrecomputedDecoder("image").decode(raw)

    @pytest.mark.parametrize("mean", [float("nan"), float("inf"), -1, 255.5, "bright", True])
    def test_invalid_color_mean_fails(self, mean):
        raw = RawInput(type="image", data={
            "ocrText": "shot",
            "dominantColors": [{"channel": "r", "mean": mean}, {"mean": 10}, {"mean": 20}],
        })
        with pytest.raises(DecodingFailure) as exc_info:
            PrecomputedDecoder("image").decode(raw)
        assert exc_info.value.kind == "image"
        assert "color mean" in str(exc_info.value)

    def test_channel_mean_bounds_accepted(self):
        raw = RawInput(type="image", data={
            "ocrText": "shot",
            "dominantColors": [{"mean": 0}, {"mean": "128"}, {"mean": 255}],
        })
        decoded = PrecomputedDecoder("image").decode(raw)
        assert [c["mean"] for c in decoded.dominant_colors] == [0.0, 128.0, 255.0]

    def test_document_payload(self):
        decoded = PrecomputedDecoder("word").decode(
            RawInput(type="word", path="brief.docx", data={"content": "Deliver the source code."})
        )
        assert decoded.kind == "word"
        assert decoded.text == "Deliver the source code."
        assert decoded.is_document
        assert decoded.ocr_text is None

    def test_document_without_content_fails(self):
        with pytest.raises(DecodingFailure) as exc_info:
            PrecomputedDecoder("pdf").decode(RawInput(type="pdf"))
        assert exc_info.value.kind == "pdf"

    def test_text_kind_not_supported(self):
        with pytest.raises(ValueError):
            PrecomputedDecoder("text")


class TestDecoderRegistry:
    """Tests for DecoderRegistry."""

    def test_default_kinds(self):
        assert create_registry().kinds == ["text", "image", "pdf", "word"]

    def test_unknown_kind_fails(self):
        with pytest.raises(DecodingFailure) as exc_info:
            create_registry().decode(RawInput(type="video"))
        assert exc_info.value.kind == "video"

    def test_unexpected_errors_are_wrapped(self):
        class BrokenDecoder(BaseDecoder):
            @property
            def kind(self):
                return "pdf"

            def _decode(self, raw):
                raise RuntimeError("corrupt file")

        registry = DecoderRegistry([BrokenDecoder()])
        with pytest.raises(DecodingFailure) as exc_info:
            registry.decode(RawInput(type="pdf"))
        assert exc_info.value.kind == "pdf"
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert str(exc_info.value) == "pdf processing error: corrupt file"


class TestCombineInputs:
    """Tests for combine_inputs."""

    def test_images_precede_typed_text(self):
        combined = combine_inputs([
            DecodedInput(kind="image", text="first screen"),
            DecodedInput(kind="image", text="second screen"),
            DecodedInput(kind="text", text="Build a booking app"),
        ])
        text = combined.combined_text
        assert text.index("[Image OCR]: first screen") < text.index("[Image OCR]: second screen")
        assert text.rindex("[Image OCR]:") < text.index("Build a booking app")

    def test_typed_text_goes_last_even_when_it_arrives_first(self):
        combined = combine_inputs([
            DecodedInput(kind="text", text="Build a booking app"),
            DecodedInput(kind="pdf", text="Phase 1: design"),
            DecodedInput(kind="word", text="Deliver docs"),
        ])
        assert combined.combined_text == (
            "[PDF Content]: Phase 1: design\n\n"
            "[Word Content]: Deliver docs\n\n"
            "Build a booking app\n\n"
        )
        assert combined.text_content == "Build a booking app\n\n"

    def test_source_types_distinct_in_arrival_order(self):
        combined = combine_inputs([
            DecodedInput(kind="image", text="a"),
            DecodedInput(kind="text", text="b"),
            DecodedInput(kind="image", text="c"),
        ])
        assert combined.source_types == ["image", "text"]

    def test_buckets_and_paths(self):
        combined = combine_inputs([
            DecodedInput(kind="image", text="a", path="one.png"),
            DecodedInput(kind="pdf", text="b"),
            DecodedInput(kind="image", text="c"),
        ])
        assert combined.first_image.text == "a"
        assert combined.image_paths == ["one.png", ""]
        assert combined.document_paths == [""]

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            combine_inputs([DecodedInput(kind="video", text="x")])

    def test_from_text(self):
        combined = CombinedInput.from_text("  Build a shop  ")
        assert combined.combined_text == "Build a shop\n\n"
        assert combined.source_types == ["text"]
        assert combined.first_image is None
