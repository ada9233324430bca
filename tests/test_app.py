import unittest
import random
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import app
from storage.app_state import AppState
from storage.store import MemoryStore


class TestWebApi(unittest.TestCase):

    def setUp(self):
        app.config["TESTING"] = True
        app.config["APP_STATE"] = AppState(MemoryStore(), rng=random.Random(5))
        self.client = app.test_client()

    def tearDown(self):
        app.config.pop("APP_STATE", None)

    def test_dice_probability(self):
        response = self.client.get('/api/dice/probability?dice=2&faces=6&target=7')
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertAlmostEqual(data["probability"], 100 / 6)
        self.assertEqual(data["rating"], "Tough")

    def test_dice_probability_out_of_range(self):
        data = self.client.get('/api/dice/probability?dice=3&faces=6&target=50').get_json()
        self.assertEqual(data["probability"], 0.0)
        self.assertEqual(data["clamped_target"], 18)

    def test_dice_bad_input(self):
        response = self.client.get('/api/dice/probability?dice=0&faces=6&target=3')
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.get_json())

        response = self.client.get('/api/dice/probability?dice=abc&faces=6&target=3')
        self.assertEqual(response.status_code, 400)

        response = self.client.get('/api/dice/probability?faces=6&target=3')
        self.assertEqual(response.status_code, 400)

    def test_dice_limits(self):
        """Dice count and type are limited to the choices the UI offers"""
        for query in ('/api/dice/distribution?dice=400&faces=20',
                      '/api/dice/distribution?dice=11&faces=6',
                      '/api/dice/distribution?dice=3&faces=7',
                      '/api/dice/probability?dice=2&faces=1000&target=5'):
            response = self.client.get(query)
            self.assertEqual(response.status_code, 400, query)
            self.assertIn("error", response.get_json())

        response = self.client.post('/api/dice/simulate', json={"dice": 50, "faces": 6})
        self.assertEqual(response.status_code, 400)

        response = self.client.get('/api/dice/distribution?dice=10&faces=20')
        self.assertEqual(response.status_code, 200)

    def test_dice_distribution(self):
        data = self.client.get('/api/dice/distribution?dice=2&faces=4').get_json()
        sums = [row["sum"] for row in data["distribution"]]
        self.assertEqual(sums, list(range(2, 9)))
        self.assertAlmostEqual(sum(row["probability"] for row in data["distribution"]), 100.0)

    def test_dice_simulate(self):
        data = self.client.post('/api/dice/simulate',
                                json={"dice": 3, "faces": 6, "rolls": 100}).get_json()
        self.assertEqual(len(data["results"]), 100)
        self.assertEqual(sum(row["frequency"] for row in data["frequencies"]), 100)

    def test_dice_simulate_limit(self):
        response = self.client.post('/api/dice/simulate',
                                    json={"dice": 3, "faces": 6, "rolls": 10 ** 6})
        self.assertEqual(response.status_code, 400)

    def test_cards_probability(self):
        data = self.client.get('/api/cards/probability?deck=52&hand=Pair').get_json()
        self.assertEqual(data["probability"], 42.256)
        self.assertEqual(data["rating"], "Great odds!")

        data = self.client.get('/api/cards/probability?deck=36&hand=Pair').get_json()
        self.assertAlmostEqual(data["probability"], 100 / 36)

    def test_cards_unsupported_deck(self):
        response = self.client.get('/api/cards/probability?deck=40&hand=Pair')
        self.assertEqual(response.status_code, 400)

    def test_cards_deal(self):
        data = self.client.post('/api/cards/deal',
                                json={"hand_size": 7, "deck": 52, "hand": "Flush"}).get_json()
        self.assertEqual(len(data["cards"]), 7)
        self.assertEqual(data["probability"], 0.197)

        response = self.client.post('/api/cards/deal', json={"hand_size": 9})
        self.assertEqual(response.status_code, 400)

    def test_tournament_flow(self):
        self.assertIsNone(self.client.get('/api/tournament/challenge').get_json()["challenge"])

        response = self.client.post('/api/tournament/attempt')
        self.assertEqual(response.status_code, 400)

        challenge = self.client.post('/api/tournament/challenge').get_json()["challenge"]
        self.assertEqual(challenge["attempts"], 0)
        self.assertEqual(self.client.get('/api/tournament/leaderboard').get_json()["challenges"], [])

        updated = self.client.post('/api/tournament/attempt').get_json()["challenge"]
        self.assertEqual(updated["id"], challenge["id"])
        self.assertEqual(updated["attempts"], 100)

        board = self.client.get('/api/tournament/leaderboard').get_json()["challenges"]
        self.assertEqual([c["id"] for c in board], [challenge["id"]])

    def test_settings(self):
        data = self.client.get('/api/settings').get_json()
        self.assertEqual(data, {"dark_mode": False, "animations_enabled": True, "total_challenges": 0})

        data = self.client.post('/api/settings', json={"dark_mode": True}).get_json()
        self.assertTrue(data["dark_mode"])

        response = self.client.post('/api/settings', json={"animations_enabled": "no"})
        self.assertEqual(response.status_code, 400)

    def test_clear(self):
        self.client.post('/api/tournament/challenge')
        self.client.post('/api/tournament/attempt')
        self.client.post('/api/settings', json={"dark_mode": True})

        data = self.client.post('/api/settings/clear').get_json()
        self.assertTrue(data["success"])
        self.assertEqual(data["total_challenges"], 0)
        self.assertFalse(data["dark_mode"])

    def test_export_csv(self):
        self.client.post('/api/tournament/challenge')
        self.client.post('/api/tournament/attempt')
        response = self.client.get('/api/export.csv')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.mimetype, "text/csv")
        lines = response.get_data(as_text=True).splitlines()
        self.assertEqual(lines[0], "Challenge,Probability,Attempts,Successes,Success Rate")
        self.assertEqual(len(lines), 2)


if __name__ == "__main__":
    unittest.main()
