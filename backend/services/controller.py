"""Session coordinator: one active game per player, driven by channel and submit events."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress
from dataclasses import replace
from typing import Callable

from models import GameSession, Question
from services import messages
from services.channel import PushChannel
from services.connection_registry import ConnectionRegistry
from services.errors import ChannelMissingError, NoActiveSessionError, PlayerNotFoundError
from services.evaluator import is_correct
from services.persistence import PersistenceGateway
from services.questions import generate_question
from services.session_store import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_NEXT_QUESTION_DELAY = 2.5  # seconds the round result stays on screen


class SessionController:
    """
    Owns the session store and connection registry for one server process.

    Per player, Start / Submit / Disconnect and the delayed next-question step run
    under that player's asyncio.Lock, so they never interleave, including across
    the save_score await on game over. Different players never share a lock.
    Pushes happen while the lock is held and before any await, so each channel
    receives newQuestion -> roundResult -> newQuestion | gameOver in order.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        *,
        next_question_delay: float = DEFAULT_NEXT_QUESTION_DELAY,
        question_factory: Callable[[], Question] = generate_question,
    ) -> None:
        self._gateway = gateway
        self._delay = next_question_delay
        self._generate = question_factory
        self._sessions = SessionStore()
        self._connections = ConnectionRegistry()
        self._locks: dict[int, asyncio.Lock] = {}
        self._lock_users: Counter[int] = Counter()
        self._generations: dict[int, int] = {}
        self._continuations: dict[int, asyncio.Task[None]] = {}

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def get_session(self, player_id: int) -> GameSession | None:
        return self._sessions.get(player_id)

    def get_channel(self, player_id: int) -> PushChannel | None:
        return self._connections.lookup_by_player(player_id)

    def active_players(self) -> list[int]:
        return self._sessions.player_ids()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def start(self, player_id: int, channel: PushChannel) -> GameSession | None:
        """
        Begin a new game for player_id on channel, replacing any game already running.

        Returns None without touching any state when the channel is already closed.
        """
        if channel.closed:
            logger.warning(
                "[controller] Ignoring start for player %s on closed channel %s",
                player_id,
                channel.label,
            )
            return None

        previous_owner = self._connections.lookup_by_channel(channel)
        if previous_owner is not None and previous_owner != player_id:
            logger.info(
                "[controller] Channel %s switches from player %s to %s",
                channel.label,
                previous_owner,
                player_id,
            )
            await self._release(previous_owner, channel)

        async with self._player_lock(player_id):
            previous = self._sessions.remove(player_id)
            if previous is not None:
                self._cancel_continuation(player_id)
                logger.info(
                    "[controller] Discarding generation %s for player %s (score=%s lives=%s)",
                    previous.generation,
                    player_id,
                    previous.score,
                    previous.lives,
                )

            generation = self._generations.get(player_id, 0) + 1
            self._generations[player_id] = generation
            session = GameSession(
                player_id=player_id,
                current_question=self._generate(),
                generation=generation,
            )
            self._sessions.create(player_id, session)
            self._connections.attach(player_id, channel)
            channel.push(messages.new_question(session))

        logger.info(
            "[controller] Player %s started game generation=%s on %s",
            player_id,
            generation,
            channel.label,
        )
        return session

    async def submit(self, player_id: int, measured: int | float) -> bool:
        """
        Score one measurement against the player's current question.

        Raises PlayerNotFoundError / NoActiveSessionError before touching any state,
        and ChannelMissingError if the session has lost its channel.
        Returns whether the measurement was within tolerance.
        """
        if await self._gateway.find_player(player_id) is None:
            raise PlayerNotFoundError(player_id)

        async with self._player_lock(player_id):
            session = self._sessions.get(player_id)
            if session is None:
                raise NoActiveSessionError(player_id)
            channel = self._connections.lookup_by_player(player_id)
            if channel is None:
                logger.error(
                    "[controller] Player %s has session generation=%s but no channel",
                    player_id,
                    session.generation,
                )
                raise ChannelMissingError(player_id)

            correct = is_correct(session.current_question, measured)
            if correct:
                session = replace(
                    session,
                    score=session.score + 1,
                    questions_answered=session.questions_answered + 1,
                )
            else:
                session = replace(session, lives=session.lives - 1)
            self._sessions.replace(player_id, session)

            logger.info(
                "[controller] Player %s measured %s for target %s±%s: %s (score=%s lives=%s)",
                player_id,
                measured,
                session.current_question.target,
                session.current_question.tolerance,
                "correct" if correct else "wrong",
                session.score,
                session.lives,
            )
            channel.push(messages.round_result(session, correct=correct, measured=measured))

            if session.is_over:
                await self._finish(session, channel)
            else:
                self._schedule_next_question(session)
        return correct

    async def disconnect(self, channel: PushChannel) -> None:
        """Clean up after a channel closed. Unknown channels are ignored."""
        player_id = self._connections.lookup_by_channel(channel)
        if player_id is None:
            logger.debug("[controller] %s closed with no player attached", channel.label)
            return
        await self._release(player_id, channel)

    async def shutdown(self) -> None:
        """Cancel pending next-question tasks and close every channel."""
        tasks = list(self._continuations.values())
        self._continuations.clear()
        for task in tasks:
            task.cancel()
        for task in tasks:
            with suppress(asyncio.CancelledError):
                await task
        for channel in self._connections.channels():
            channel.close()
        for player_id in self._sessions.player_ids():
            self._sessions.remove(player_id)
            self._connections.detach(player_id)
        logger.info("[controller] Shut down; cancelled %d pending question(s)", len(tasks))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _player_lock(self, player_id: int) -> AsyncIterator[None]:
        """Hold player_id's lock; the lock is dropped once nobody holds or waits on it."""
        lock = self._locks.setdefault(player_id, asyncio.Lock())
        self._lock_users[player_id] += 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[player_id] -= 1
            if self._lock_users[player_id] <= 0:
                del self._lock_users[player_id]
                self._locks.pop(player_id, None)

    async def _release(self, player_id: int, channel: PushChannel) -> None:
        async with self._player_lock(player_id):
            if self._connections.lookup_by_player(player_id) is not channel:
                # Already replaced by a newer start or torn down by game over.
                return
            session = self._teardown(player_id)
        logger.info(
            "[controller] Player %s disconnected; dropped generation=%s",
            player_id,
            session.generation if session else None,
        )

    async def _finish(self, session: GameSession, channel: PushChannel) -> None:
        player_id = session.player_id
        logger.info("[controller] Game over for player %s. Final score: %s", player_id, session.score)
        try:
            saved = await self._gateway.save_score(player_id, session.score)
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "[controller] Failed to save score on game over for player %s: %s",
                player_id,
                exc,
                exc_info=True,
            )
        else:
            if not saved:
                logger.warning("[controller] Score for player %s was not saved", player_id)

        channel.push(messages.game_over(session))
        channel.close()
        self._teardown(player_id)

    def _teardown(self, player_id: int) -> GameSession | None:
        session = self._sessions.remove(player_id)
        self._connections.detach(player_id)
        self._cancel_continuation(player_id)
        return session

    def _schedule_next_question(self, session: GameSession) -> None:
        player_id = session.player_id
        self._cancel_continuation(player_id)
        task = asyncio.create_task(
            self._deliver_next_question(player_id, session.generation),
            name=f"next-question-{player_id}-{session.generation}",
        )
        self._continuations[player_id] = task
        task.add_done_callback(lambda t: self._forget_continuation(player_id, t))

    def _cancel_continuation(self, player_id: int) -> None:
        task = self._continuations.pop(player_id, None)
        if task is not None and task is not asyncio.current_task():
            task.cancel()

    def _forget_continuation(self, player_id: int, task: asyncio.Task[None]) -> None:
        if self._continuations.get(player_id) is task:
            self._continuations.pop(player_id, None)
        if not task.cancelled() and task.exception() is not None:
            logger.error(
                "[controller] Next question task for player %s failed",
                player_id,
                exc_info=task.exception(),
            )

    async def _deliver_next_question(self, player_id: int, generation: int) -> None:
        await asyncio.sleep(self._delay)
        async with self._player_lock(player_id):
            session = self._sessions.get(player_id)
            if session is None or session.generation != generation:
                logger.debug(
                    "[controller] Skipping stale next question for player %s generation=%s",
                    player_id,
                    generation,
                )
                return
            session = replace(session, current_question=self._generate())
            self._sessions.replace(player_id, session)

            channel = self._connections.lookup_by_player(player_id)
            if channel is None:
                logger.warning(
                    "[controller] Player %s has no channel; next question not pushed",
                    player_id,
                )
                return
            channel.push(messages.new_question(session))
