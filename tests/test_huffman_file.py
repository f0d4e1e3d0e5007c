import pytest

import huffman as huff
import huffman_file


def _asker(*answers):
    answers = list(answers)
    def ask(prompt):
        return answers.pop(0)
    return ask


def test_encode_text_roundtrip():
    result, decoded = huffman_file.encode_text("héllo wörld")
    assert decoded == "héllo wörld"
    assert set(result.bits) <= {"0", "1"}


def test_main_with_path(tmp_path, capsys):
    src = tmp_path / "source.txt"
    src.write_text("abracadabra", encoding="utf-8")
    out = tmp_path / "out"

    rc = huffman_file.main([str(src), "--outdir", str(out)])

    assert rc == 0
    assert (out / "result.txt").read_text(encoding="utf-8") == "abracadabra"
    expected_bits = huff.compress(b"abracadabra").bits
    assert (out / "encoded.huff").read_text(encoding="utf-8") == expected_bits
    printed = capsys.readouterr().out
    assert "Huffman Encoding: " + expected_bits in printed
    assert "Huffman Decoding: abracadabra" in printed


def test_main_quiet_custom_names(tmp_path, capsys):
    src = tmp_path / "source.txt"
    src.write_text("aaaa", encoding="utf-8")

    rc = huffman_file.main([str(src), "--outdir", str(tmp_path), "--encoded", "a.huff", "--result", "a.txt", "--quiet"])

    assert rc == 0
    assert (tmp_path / "a.huff").read_text(encoding="utf-8") == "1111"
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "aaaa"
    assert "Huffman Encoding" not in capsys.readouterr().out


def test_main_empty_file(tmp_path):
    src = tmp_path / "empty.txt"
    src.write_text("", encoding="utf-8")

    assert huffman_file.main([str(src), "--outdir", str(tmp_path), "--quiet"]) == 0
    assert (tmp_path / "encoded.huff").read_text(encoding="utf-8") == ""
    assert (tmp_path / "result.txt").read_text(encoding="utf-8") == ""


def test_main_prompts_again_after_bad_name(tmp_path, capsys):
    src = tmp_path / "source.txt"
    src.write_text("mississippi", encoding="utf-8")

    rc = huffman_file.main(["--outdir", str(tmp_path), "--quiet"],
        ask=_asker(str(tmp_path / "missing.txt"), str(src)))

    assert rc == 0
    assert (tmp_path / "result.txt").read_text(encoding="utf-8") == "mississippi"
    printed = capsys.readouterr().out
    assert "Error in Reading the File" in printed
    assert "Try Again" in printed


def test_bad_command_line_path_falls_back_to_prompt(tmp_path):
    src = tmp_path / "source.txt"
    src.write_text("xyz", encoding="utf-8")

    found = huffman_file.prompt_for_text(str(tmp_path / "nope.txt"), 0, ask=_asker(str(src)))

    assert found == (str(src), "xyz")


def test_non_utf8_file_is_rejected(tmp_path, capsys):
    src = tmp_path / "latin1.txt"
    src.write_bytes(b"caf\xe9")

    found = huffman_file.prompt_for_text(str(src), 1)

    assert found is None
    assert "Must be UTF-8" in capsys.readouterr().out


def test_main_gives_up(tmp_path, capsys):
    rc = huffman_file.main(["--max-attempts", "2", "--outdir", str(tmp_path)],
        ask=_asker(str(tmp_path / "a.txt"), str(tmp_path / "b.txt")))

    assert rc == 1
    assert "Giving up after 2 attempts" in capsys.readouterr().out
    assert not (tmp_path / "encoded.huff").exists()
