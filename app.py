"""
Probability Calc - Web Application
機率計算器 - Flask Web 應用

啟動方式:
    python app.py

API 位置: http://localhost:8000/api/...
"""

import logging
import os

from flask import Flask, Response, jsonify, request

from game.card import deal_random_hand
from probability.dice import (
    DICE_TYPES, MIN_DICE, MAX_DICE, probability_of_sum, sum_distribution, clamp_target_sum,
    simulate_rolls, simulated_frequencies, rate_dice_probability
)
from probability.hands import DeckType, HandCategory, probability_of_hand, rate_hand_probability
from storage.app_state import AppState, create_app_state

logger = logging.getLogger(__name__)

app = Flask(__name__)

MAX_SIMULATED_ROLLS = 10000


def get_state() -> AppState:
    """取得應用程式狀態（第一次使用時由資料目錄載入）"""
    state = app.config.get("APP_STATE")
    if state is None:
        state = create_app_state()
        app.config["APP_STATE"] = state
    return state


def _int_arg(source: dict, name: str, default=None) -> int:
    value = source.get(name, default)
    if value is None:
        raise ValueError(f"缺少參數: {name}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"參數 {name} 必須是整數，收到 {value!r}")


def _dice_args(source: dict):
    """讀取骰子數量與面數，限制在介面可選的範圍內"""
    dice = _int_arg(source, 'dice')
    faces = _int_arg(source, 'faces')
    if not MIN_DICE <= dice <= MAX_DICE:
        raise ValueError(f"骰子數量必須介於 {MIN_DICE} 與 {MAX_DICE} 之間，收到 {dice}")
    if faces not in DICE_TYPES:
        raise ValueError(f"不支援的骰子面數: {faces} (支援: {DICE_TYPES})")
    return dice, faces


def _challenge_dict(challenge) -> dict:
    data = challenge.to_dict()
    data["success_rate"] = challenge.success_rate
    return data


@app.errorhandler(ValueError)
def handle_value_error(e):
    return jsonify({"error": str(e)}), 400


# ===== Dice =====

@app.route('/api/dice/probability', methods=['GET'])
def dice_probability():
    """計算點數和機率"""
    dice, faces = _dice_args(request.args)
    target = _int_arg(request.args, 'target')

    probability = probability_of_sum(dice, faces, target)
    return jsonify({
        "dice": dice,
        "faces": faces,
        "target": target,
        "clamped_target": clamp_target_sum(target, dice, faces),
        "probability": probability,
        "rating": rate_dice_probability(probability),
    })


@app.route('/api/dice/distribution', methods=['GET'])
def dice_distribution():
    """點數和分佈"""
    dice, faces = _dice_args(request.args)
    distribution = sum_distribution(dice, faces)
    return jsonify({
        "dice": dice,
        "faces": faces,
        "distribution": [{"sum": s, "probability": p} for s, p in distribution.items()],
    })


@app.route('/api/dice/simulate', methods=['POST'])
def dice_simulate():
    """模擬擲骰"""
    data = request.get_json(silent=True) or {}
    dice, faces = _dice_args(data)
    rolls = _int_arg(data, 'rolls', 100)
    if rolls > MAX_SIMULATED_ROLLS:
        raise ValueError(f"擲骰次數最多 {MAX_SIMULATED_ROLLS}")

    results = simulate_rolls(dice, faces, rolls)
    return jsonify({
        "results": results,
        "frequencies": [{"sum": s, "frequency": f} for s, f in simulated_frequencies(results)],
    })


# ===== Cards =====

def _card_query(source: dict):
    deck = DeckType.from_size(_int_arg(source, 'deck', DeckType.POKER.size))
    hand = HandCategory.from_name(str(source.get('hand', HandCategory.PAIR.value)))
    return deck, hand


@app.route('/api/cards/probability', methods=['GET'])
def cards_probability():
    """牌型機率"""
    deck, hand = _card_query(request.args)
    probability = probability_of_hand(deck.size, hand)
    return jsonify({
        "deck": deck.label,
        "hand": hand.value,
        "probability": probability,
        "rating": rate_hand_probability(probability),
    })


@app.route('/api/cards/deal', methods=['POST'])
def cards_deal():
    """隨機發牌"""
    data = request.get_json(silent=True) or {}
    deck, hand = _card_query(data)
    cards = deal_random_hand(_int_arg(data, 'hand_size', 5))
    probability = probability_of_hand(deck.size, hand)
    return jsonify({
        "cards": [c.to_dict() for c in cards],
        "deck": deck.label,
        "hand": hand.value,
        "probability": probability,
        "rating": rate_hand_probability(probability),
    })


# ===== Tournament =====

@app.route('/api/tournament/challenge', methods=['GET'])
def current_challenge():
    challenge = get_state().current_challenge
    return jsonify({"challenge": _challenge_dict(challenge) if challenge else None})


@app.route('/api/tournament/challenge', methods=['POST'])
def new_challenge():
    """產生新挑戰"""
    challenge = get_state().new_challenge()
    return jsonify({"challenge": _challenge_dict(challenge)})


@app.route('/api/tournament/attempt', methods=['POST'])
def attempt_challenge():
    """對目前挑戰嘗試 100 次"""
    challenge = get_state().record_attempt()
    return jsonify({"challenge": _challenge_dict(challenge)})


@app.route('/api/tournament/leaderboard', methods=['GET'])
def leaderboard():
    return jsonify({
        "challenges": [_challenge_dict(c) for c in get_state().leaderboard()]
    })


# ===== Settings =====

@app.route('/api/settings', methods=['GET'])
def get_settings():
    return jsonify(get_state().settings())


@app.route('/api/settings', methods=['POST'])
def update_settings():
    """更新設定旗標"""
    data = request.get_json(silent=True) or {}
    state = get_state()
    for key, setter in (("dark_mode", state.set_dark_mode),
                        ("animations_enabled", state.set_animations_enabled)):
        if key in data:
            if not isinstance(data[key], bool):
                raise ValueError(f"{key} 必須是布林值")
            setter(data[key])
    return jsonify(state.settings())


@app.route('/api/settings/clear', methods=['POST'])
def clear_data():
    """清除所有資料"""
    state = get_state()
    state.clear_all_data()
    return jsonify({"success": True, **state.settings()})


@app.route('/api/export.csv', methods=['GET'])
def export_csv():
    """匯出錦標賽紀錄"""
    return Response(
        get_state().export_csv(),
        mimetype="text/csv",
        headers={"Content-Disposition": "attachment; filename=tournament_history.csv"},
    )


if __name__ == '__main__':
    logging.basicConfig(
        level=getattr(logging, os.environ.get("PROBCALC_LOG_LEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print("\n🎲 Probability Calc - Web API")
    print("=" * 40)

    # 部署環境配置
    port = int(os.environ.get("PORT", 8000))
    # 在生產環境中關閉 debug 模式
    debug = os.environ.get("FLASK_ENV") == "development"
    print(f"API 位置: http://localhost:{port}/api/")
    print("=" * 40 + "\n")
    app.run(host='0.0.0.0', port=port, debug=debug)
