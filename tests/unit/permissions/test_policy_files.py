from src.permissions.config import MODEL_PATH, POLICY_PATH


def test_model_and_policy_files_exist():
    assert MODEL_PATH.is_file()
    assert POLICY_PATH.is_file()


def test_policy_lines_are_well_formed():
    lines = [line.strip() for line in POLICY_PATH.read_text().splitlines() if line.strip()]
    assert lines
    for line in lines:
        parts = [part.strip() for part in line.split(",")]
        assert parts[0] == "p"
        assert parts[1] in {"admin", "user", "guest"}
        assert len(parts) == 4
