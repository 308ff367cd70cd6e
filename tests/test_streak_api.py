"""
Tests for the streak endpoints and service.
"""

from datetime import date, timedelta

from examquiz_app import db
from examquiz_app.models import LearnerStreak
from examquiz_app.modules.gamification.services import StreakService

D = date(2024, 5, 6)


class TestTrackEndpoint:

    def test_first_action_opens_record(self, client, seed):
        response = client.post('/api/streak/track', json={'uid': 'uid-alice'})
        assert response.status_code == 200
        assert response.get_json() == {
            'status': 'OK',
            'data': {
                'currentStreak': 0,
                'longestStreak': 0,
                'questionsAnsweredToday': 1,
                'questionsNeededToday': 0,
                'streakMaintained': True,
            },
        }

    def test_repeat_on_same_day_only_counts_questions(self, client, seed):
        client.post('/api/streak/track', json={'uid': 'uid-alice'})
        data = client.post('/api/streak/track', json={'uid': 'uid-alice'}).get_json()['data']
        assert data['questionsAnsweredToday'] == 2
        assert data['currentStreak'] == 0

    def test_missing_uid(self, client, seed):
        response = client.post('/api/streak/track', json={})
        assert response.status_code == 400
        assert response.get_json() == {'status': 'NOK', 'message': 'Learner UID is required'}

    def test_unknown_learner(self, client, seed):
        response = client.post('/api/streak/track', json={'uid': 'uid-nobody'})
        assert response.status_code == 404
        assert response.get_json()['status'] == 'NOK'


class TestInfoEndpoint:

    def test_no_record_yet(self, client, seed):
        response = client.get('/api/streak/info/uid-bob')
        assert response.status_code == 200
        assert response.get_json()['data'] == {
            'currentStreak': 0,
            'longestStreak': 0,
            'questionsAnsweredToday': 0,
            'questionsNeededToday': 1,
            'streakMaintained': False,
        }
        assert db.session.get(LearnerStreak, seed.bob_id) is None

    def test_info_after_tracking(self, client, seed):
        client.post('/api/streak/track', json={'uid': 'uid-alice'})
        data = client.get('/api/streak/info/uid-alice').get_json()['data']
        assert data['questionsAnsweredToday'] == 1
        assert data['streakMaintained'] is True


class TestStreakService:

    def test_gap_resets_then_counts_new_day(self, app, seed):
        StreakService.track('uid-alice', today=D)
        summary = StreakService.track('uid-alice', today=D + timedelta(days=2))
        assert summary['currentStreak'] == 1
        assert summary['questionsAnsweredToday'] == 1

    def test_consecutive_days(self, app, seed):
        for offset in range(4):
            summary = StreakService.track('uid-alice', today=D + timedelta(days=offset))
        assert summary['currentStreak'] == 3
        assert summary['longestStreak'] == 3

    def test_info_rolls_over_without_incrementing(self, app, seed):
        StreakService.track('uid-alice', today=D)
        StreakService.track('uid-alice', today=D + timedelta(days=1))

        summary = StreakService.get_info('uid-alice', today=D + timedelta(days=4))
        assert summary['currentStreak'] == 0
        assert summary['longestStreak'] == 1
        assert summary['questionsAnsweredToday'] == 0

        record = db.session.get(LearnerStreak, seed.alice_id)
        assert record.last_streak_update_date == D + timedelta(days=4)
        assert record.current_streak == 0

    def test_info_next_day_keeps_streak(self, app, seed):
        StreakService.track('uid-alice', today=D)
        StreakService.track('uid-alice', today=D + timedelta(days=1))
        summary = StreakService.get_info('uid-alice', today=D + timedelta(days=2))
        assert summary['currentStreak'] == 1
        assert summary['questionsAnsweredToday'] == 0

    def test_higher_daily_threshold(self, app, seed):
        app.config['REQUIRED_DAILY_QUESTIONS'] = 2
        first = StreakService.track('uid-alice', today=D)
        assert first['questionsNeededToday'] == 1
        assert first['streakMaintained'] is False
        second = StreakService.track('uid-alice', today=D + timedelta(days=1))
        third = StreakService.track('uid-alice', today=D + timedelta(days=1))
        assert second['currentStreak'] == 0
        assert third['currentStreak'] == 1
