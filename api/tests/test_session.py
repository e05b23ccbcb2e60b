"""
Tests for the JWT session holder.
"""

import threading
from unittest.mock import MagicMock, patch

import requests
from django.test import SimpleTestCase

from api.session import Session, SessionHolder, jwt_refresh_callback

INITIAL = Session(access="a1", refresh="r1")


class SessionHolderTest(SimpleTestCase):
    def test_subscribers_notified_until_unsubscribed(self):
        holder = SessionHolder(refresh_callback=MagicMock())
        seen = []
        unsubscribe = holder.subscribe(seen.append)

        holder.set_session(INITIAL)
        unsubscribe()
        holder.clear()

        self.assertEqual(seen, [INITIAL])
        self.assertFalse(holder.is_authenticated)

    def test_failing_subscriber_does_not_block_others(self):
        holder = SessionHolder(refresh_callback=MagicMock())
        seen = []
        holder.subscribe(MagicMock(side_effect=RuntimeError("boom")))
        holder.subscribe(seen.append)

        holder.set_session(INITIAL)

        self.assertEqual(seen, [INITIAL])

    def test_refresh_replaces_session(self):
        refreshed = Session(access="a2", refresh="r1")
        callback = MagicMock(return_value=refreshed)
        holder = SessionHolder(callback, session=INITIAL)
        seen = []
        holder.subscribe(seen.append)

        self.assertEqual(holder.refresh(), refreshed)

        callback.assert_called_once_with(INITIAL)
        self.assertEqual(holder.session, refreshed)
        self.assertEqual(seen, [refreshed])

    def test_refresh_error_clears_session(self):
        holder = SessionHolder(MagicMock(side_effect=requests.HTTPError("401")), session=INITIAL)
        seen = []
        holder.subscribe(seen.append)

        self.assertIsNone(holder.refresh())

        self.assertIsNone(holder.session)
        self.assertEqual(seen, [None])

    def test_refresh_without_session_is_noop(self):
        callback = MagicMock()
        holder = SessionHolder(callback)

        self.assertIsNone(holder.refresh())
        callback.assert_not_called()

    def test_auto_refresh_runs_on_timer(self):
        refreshed = threading.Event()

        def callback(session):
            refreshed.set()
            return Session(access="a2", refresh=session.refresh)

        holder = SessionHolder(callback, session=INITIAL)
        holder.start_auto_refresh(interval=0.01)
        try:
            self.assertTrue(refreshed.wait(timeout=2))
        finally:
            holder.stop_auto_refresh()

        self.assertEqual(holder.session.access, "a2")


class JwtRefreshCallbackTest(SimpleTestCase):
    @patch('api.session.requests.post')
    def test_posts_refresh_token(self, mock_post):
        mock_post.return_value.json.return_value = {"access": "a2"}
        refresh = jwt_refresh_callback("http://testserver/api/v1/token/refresh/", timeout=3)

        session = refresh(INITIAL)

        self.assertEqual(session, Session(access="a2", refresh="r1"))
        mock_post.assert_called_once_with(
            "http://testserver/api/v1/token/refresh/",
            json={"refresh": "r1"},
            timeout=3,
        )

    @patch('api.session.requests.post')
    def test_rotated_refresh_token_kept(self, mock_post):
        mock_post.return_value.json.return_value = {"access": "a2", "refresh": "r2"}

        session = jwt_refresh_callback("http://testserver/refresh/", timeout=3)(INITIAL)

        self.assertEqual(session.refresh, "r2")

    @patch('api.session.requests.post')
    def test_http_error_propagates(self, mock_post):
        mock_post.return_value.raise_for_status.side_effect = requests.HTTPError("401")

        with self.assertRaises(requests.HTTPError):
            jwt_refresh_callback("http://testserver/refresh/", timeout=3)(INITIAL)
