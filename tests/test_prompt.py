import os

from randfile.prompt import confirm, file_exists


def answers(*replies):
    replies = iter(replies)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        reply = next(replies)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    fake_input.prompts = prompts
    return fake_input


def test_confirm_yes_no():
    assert confirm("Go?", input_func=answers("y")) is True
    assert confirm("Go?", input_func=answers("YES")) is True
    assert confirm("Go?", default=True, input_func=answers("n")) is False
    assert confirm("Go?", default=True, input_func=answers(" No ")) is False


def test_confirm_default():
    assert confirm("Go?", default=True, input_func=answers("")) is True
    assert confirm("Go?", default=False, input_func=answers("")) is False


def test_confirm_eof_uses_default():
    assert confirm("Go?", default=True, input_func=answers(EOFError())) is True


def test_confirm_reasks(capsys):
    fake = answers("maybe", "y")
    assert confirm("Go?", input_func=fake) is True
    assert fake.prompts == ["Go? (y/n) [n]: ", "Go? (y/n) [n]: "]
    assert "Please answer y or n." in capsys.readouterr().out


def test_file_exists(tmp_path):
    path = tmp_path / "f"
    assert not file_exists(path)
    path.write_bytes(b"")
    assert file_exists(path)


def test_file_exists_dangling_symlink(tmp_path):
    link = tmp_path / "link"
    os.symlink(tmp_path / "nowhere", link)
    assert file_exists(link)
