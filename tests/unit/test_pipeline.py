"""Tests for adforge.core.pipeline — stage ordering and failure isolation.

Tests cover:
- The end-to-end success path with a fake generation client.
- Validation failures making zero service calls and writing nothing.
- Each error kind mapped to a failure outcome.
- Unexpected exceptions converted to a generic failure.
- build_pipeline() wiring from configuration.
"""

from pathlib import Path

from adforge.core.artifact_store import ArtifactStore
from adforge.core.invoker import GenerationInvoker
from adforge.core.pipeline import ImagePipeline, build_pipeline, compile_request
from adforge.core.schemas import Domain, LogoRequest
from conftest import FakeClient, image_part, make_response, make_image_bytes, text_part


class TestCompileRequest:
    """Test compile_request()."""

    def test_returns_request_and_prompt(self, valid_payloads):
        request, prompt = compile_request("logo", valid_payloads["logo"])
        assert isinstance(request, LogoRequest)
        assert '"Blue Fern Studio"' in prompt


class TestRunSuccess:
    """Test the success path."""

    def test_marketing_scenario(self, pipeline: ImagePipeline, fake_client, outputs_dir: Path):
        outcome = pipeline.run("marketing", {"prompt": "a red bicycle", "aspectRatio": "1:1"})

        assert outcome.success
        assert outcome.domain is Domain.MARKETING
        sent = fake_client.models.calls[0]["contents"]
        assert "square composition" in sent
        assert "a red bicycle" in sent
        files = list(outputs_dir.iterdir())
        assert [f.name for f in files] == [outcome.path.name]
        assert outcome.path.name.startswith("marketing-")
        assert outcome.path.suffix == ".png"

    def test_prefix_and_slug_per_domain(self, pipeline: ImagePipeline, valid_payloads):
        expected = {
            "marketing": "marketing-",
            "logo": "logo-blue-fern-studio-",
            "mockup": "product-aurora-serum-",
            "food": "food-wild-mushroom-risotto-",
            "portrait": "portrait-architecture-",
            "product": "commercial-pulse-one-headphones-",
        }
        for name, prefix in expected.items():
            outcome = pipeline.run(name, valid_payloads[name])
            assert outcome.success, outcome.text
            assert outcome.path.name.startswith(prefix)

    def test_accepts_enum_domain(self, pipeline: ImagePipeline, valid_payloads):
        assert pipeline.run(Domain.LOGO, valid_payloads["logo"]).success


class TestRunFailures:
    """Each failure ends the run and becomes a failure outcome."""

    def test_validation_failure_makes_no_call(self, pipeline, fake_client, outputs_dir):
        outcome = pipeline.run("logo", {"businessName": "Acme", "style": {}})

        assert outcome.is_error
        assert outcome.error_kind == "validation"
        assert "style.type" in outcome.text
        assert fake_client.models.calls == []
        assert not outputs_dir.exists()

    def test_unknown_domain(self, pipeline, fake_client):
        outcome = pipeline.run("billboard", {})
        assert outcome.domain is None
        assert outcome.error_kind == "validation"
        assert fake_client.models.calls == []

    def test_zero_candidates_writes_nothing(self, store: ArtifactStore, outputs_dir: Path):
        client = FakeClient(response=make_response())
        pipeline = ImagePipeline(GenerationInvoker(client, "m"), store)

        outcome = pipeline.run("marketing", {"prompt": "a lamp"})

        assert outcome.error_kind == "invocation"
        assert "no image data" in outcome.text.lower()
        assert not outputs_dir.exists()

    def test_service_exception(self, store: ArtifactStore):
        client = FakeClient(error=ConnectionError("reset by peer"))
        pipeline = ImagePipeline(GenerationInvoker(client, "m"), store)

        outcome = pipeline.run("marketing", {"prompt": "a lamp"})

        assert outcome.error_kind == "invocation"
        assert "reset by peer" not in outcome.text

    def test_oversized_image(self, fake_client, outputs_dir: Path):
        store = ArtifactStore(outputs_dir, max_bytes=16)
        pipeline = ImagePipeline(GenerationInvoker(fake_client, "m"), store)

        outcome = pipeline.run("marketing", {"prompt": "a lamp"})

        assert outcome.error_kind == "size_limit"
        assert not outputs_dir.exists()

    def test_undecodable_image(self, store: ArtifactStore):
        client = FakeClient(response=make_response([image_part(b"garbage bytes")]))
        pipeline = ImagePipeline(GenerationInvoker(client, "m"), store)

        outcome = pipeline.run("food", {
            "dish": {"name": "Soup", "description": "Tomato soup"},
            "photography": {"style": "overhead", "lighting": "golden-hour"},
        })

        assert outcome.error_kind == "persistence"
        assert outcome.text.startswith("❌ Error generating food photography:")

    def test_unexpected_exception(self, pipeline: ImagePipeline, monkeypatch):
        def boom(*args, **kwargs):
            raise KeyError("internal detail")

        monkeypatch.setattr(pipeline.store, "save", boom)
        outcome = pipeline.run("marketing", {"prompt": "a lamp"})

        assert outcome.error_kind == "unexpected"
        assert outcome.domain is Domain.MARKETING
        assert "internal detail" not in outcome.text

    def test_first_candidate_text_only(self, store: ArtifactStore, outputs_dir: Path):
        client = FakeClient(
            response=make_response([text_part("cannot draw that")], [image_part(make_image_bytes())])
        )
        pipeline = ImagePipeline(GenerationInvoker(client, "m"), store)

        outcome = pipeline.run("marketing", {"prompt": "a lamp"})

        assert outcome.error_kind == "invocation"
        assert not outputs_dir.exists()


class TestBuildPipeline:
    """Test build_pipeline()."""

    def test_wires_config(self, test_config, fake_client):
        pipeline = build_pipeline(test_config, client=fake_client)
        assert pipeline.invoker.client is fake_client
        assert pipeline.invoker.model_name == "test-image-model"
        assert pipeline.store.outputs_dir == test_config.outputs_dir

    def test_prompt_limit_passed_through(self, test_config, fake_client):
        cfg = test_config.model_copy(update={"max_prompt_length": 50})
        pipeline = build_pipeline(cfg, client=fake_client)

        outcome = pipeline.run("marketing", {"prompt": "a lamp"})

        assert outcome.error_kind == "invocation"
        assert fake_client.models.calls == []
