from speechstitch.settings import Settings


def test_defaults(monkeypatch):
    for var in ("FFMPEG_PATH", "ELEVENLABS_VOICE_ID", "TTS_PROVIDER", "WORK_DIR", "OUTPUT_PREFIX"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.ffmpeg_path == "/opt/bin/ffmpeg"
    assert settings.elevenlabs_voice_id == "21m00Tcm4TlvDq8ikWAM"
    assert settings.tts_provider == "eleven"
    assert settings.work_dir == "/tmp/tts"
    assert settings.output_prefix == "tts-output"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("S3_BUCKET", "env-bucket")
    monkeypatch.setenv("FFMPEG_PATH", "/usr/local/bin/ffmpeg")
    monkeypatch.setenv("ELEVENLABS_VOICE_ID", "env-voice")
    settings = Settings(_env_file=None)
    assert settings.s3_bucket == "env-bucket"
    assert settings.ffmpeg_path == "/usr/local/bin/ffmpeg"
    assert settings.default_voice_id == "env-voice"


def test_default_voice_follows_provider(monkeypatch):
    monkeypatch.delenv("OPENAI_VOICE_ID", raising=False)
    settings = Settings(_env_file=None, tts_provider="openai")
    assert settings.default_voice_id == "alloy"
