import unittest
from unittest import mock

import main
from tetris_input import Key
from tetris_session import GameSession, State
from tetris_text import FrameBuffer


class ScriptedRoller:
    def next_piece(self):
        return (1, 3)


class FakeKeys:
    def __init__(self, reads=(), polls=()):
        self.reads = list(reads)
        self.polls = list(polls)

    def read_key(self):
        return self.reads.pop(0)

    def poll_key(self):
        return self.polls.pop(0) if self.polls else None


def lost_session():
    s = GameSession(ScriptedRoller())
    s.board.grid[2][4] = 1
    s.handle_input(Key.DOWN)
    s.advance(0)
    return s


class DriverTests(unittest.TestCase):
    def run_driver(self, session, keys):
        render = mock.Mock()
        with mock.patch("main.GameSession", return_value=session), \
                mock.patch("main.pygame.display.flip"), \
                mock.patch("main.pygame.quit"), \
                mock.patch("main.pygame.time.get_ticks", return_value=0), \
                mock.patch("main.pygame.time.Clock"):
            with self.assertRaises(SystemExit) as cm:
                main.run(None, render, keys, FrameBuffer())
        return cm.exception.code, render

    def test_escape_at_game_over_prompt_is_ignored(self):
        session = lost_session()
        keys = FakeKeys(reads=[Key.OTHER, Key.QUIT, Key.LEFT, Key.NO])
        code, render = self.run_driver(session, keys)
        self.assertEqual(code, 0)
        self.assertEqual(keys.reads, [])
        self.assertIs(session.state, State.GAME_OVER)
        # splash plus the game-over frame; ignored keys change nothing
        self.assertEqual(render.draw.call_count, 2)

    def test_window_close_at_game_over_prompt_exits(self):
        keys = FakeKeys(reads=[Key.OTHER, Key.CLOSE, Key.NO])
        code, render = self.run_driver(lost_session(), keys)
        self.assertEqual(code, 0)
        self.assertEqual(keys.reads, [Key.NO])
        self.assertEqual(render.draw.call_count, 1)

    def test_yes_at_prompt_restarts_play(self):
        session = lost_session()
        session.score = 50
        keys = FakeKeys(reads=[Key.OTHER, Key.YES], polls=[None, Key.QUIT])
        self.run_driver(session, keys)
        self.assertTrue(session.running)
        self.assertEqual(session.score, 0)
        self.assertEqual(keys.polls, [])

    def test_redraw_only_when_dirty(self):
        session = GameSession(ScriptedRoller())
        keys = FakeKeys(reads=[Key.OTHER], polls=[None, None, None, Key.QUIT])
        code, render = self.run_driver(session, keys)
        self.assertEqual(code, 0)
        # splash plus the first frame; later ticks change nothing
        self.assertEqual(render.draw.call_count, 2)

    def test_escape_at_splash_exits(self):
        keys = FakeKeys(reads=[Key.QUIT])
        code, render = self.run_driver(GameSession(ScriptedRoller()), keys)
        self.assertEqual(code, 0)
        self.assertEqual(render.draw.call_count, 1)


if __name__ == "__main__":
    unittest.main()
