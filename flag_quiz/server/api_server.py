"""FastAPI server that lets the quiz be played from a browser."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from flag_quiz.constants.about import APP_NAME, APP_VERSION
from flag_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from flag_quiz.core.game_controller import GameController
from flag_quiz.core.models import AnswerResult, GameState, QuestionView, SessionSummary

logger = logging.getLogger(__name__)

_PLAYER_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>FlagQuiz</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; align-items: center; }
      .card { background: #111a30; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.4); width: min(640px, 100%); }
      .hidden { display: none; }
      .header { display: flex; justify-content: space-between; font-size: 1.1rem; }
      #flag-img { display: block; width: 100%; max-height: 320px; object-fit: contain; opacity: 0; transition: opacity 200ms ease; margin: 1rem 0; }
      #continent-hint { text-align: center; color: #94a3b8; margin-bottom: 1rem; }
      .options-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 0.75rem; }
      .option-btn, .primary-button { border: none; border-radius: 0.75rem; padding: 1rem; font-size: 1rem; background: #1f9aa5; color: #fff; cursor: pointer; }
      .option-btn:disabled { cursor: not-allowed; opacity: 0.7; }
      .option-btn.correct { background: #16a34a; opacity: 1; }
      .option-btn.wrong { background: #dc2626; opacity: 1; }
      #feedback { margin-top: 1rem; display: flex; justify-content: space-between; align-items: center; }
      .stat-row { display: flex; justify-content: space-between; padding: 0.25rem 0; }
      #flash-overlay { position: fixed; inset: 0; pointer-events: none; opacity: 0; }
      .flash-correct { animation: flash-green 400ms ease; }
      .flash-wrong { animation: flash-red 400ms ease; }
      @keyframes flash-green { from { opacity: 0.35; background: #16a34a; } to { opacity: 0; } }
      @keyframes flash-red { from { opacity: 0.35; background: #dc2626; } to { opacity: 0; } }
    </style>
  </head>
  <body>
    <div id=\"flash-overlay\"></div>
    <section class=\"card\" id=\"game-container\">
      <div class=\"header\"><span>Score: <strong id=\"score\">0</strong></span><span id=\"count\">0/0</span></div>
      <img id=\"flag-img\" alt=\"Flag\" />
      <div id=\"continent-hint\"></div>
      <div id=\"options-container\" class=\"options-grid\"></div>
      <div id=\"feedback\" class=\"hidden\"><span id=\"feedback-text\"></span><button id=\"next-btn\" class=\"primary-button\">Next Flag</button></div>
    </section>
    <section class=\"card hidden\" id=\"game-over\">
      <h2>Game Over</h2>
      <p><strong id=\"final-score-value\"></strong> <span id=\"final-message\"></span></p>
      <div id=\"stats-breakdown\"></div>
      <button id=\"restart-btn\" class=\"primary-button\">Play Again</button>
    </section>
    <script>
      const AudioCtor = window.AudioContext || window.webkitAudioContext;
      const audioCtx = AudioCtor ? new AudioCtor() : null;

      function playTone(freq, type, duration, start, gainValue, floor) {
        if (!audioCtx) return;
        if (audioCtx.state === 'suspended') audioCtx.resume();
        const t0 = audioCtx.currentTime + (start || 0);
        const osc = audioCtx.createOscillator();
        const gain = audioCtx.createGain();
        osc.type = type;
        osc.frequency.setValueAtTime(freq, t0);
        gain.gain.setValueAtTime(gainValue || 0.1, t0);
        gain.gain.exponentialRampToValueAtTime(floor || 0.0001, t0 + duration);
        osc.connect(gain);
        gain.connect(audioCtx.destination);
        osc.start(t0);
        osc.stop(t0 + duration);
      }
      function playWin() {
        [523.25, 659.25, 783.99, 1046.50].forEach((f, i) => playTone(f, 'sine', 0.3, i * 0.1, 0.05, 0.001));
      }
      function playLose() {
        playTone(150, 'sawtooth', 0.4);
        playTone(140, 'sawtooth', 0.4);
      }

      const el = id => document.getElementById(id);
      const optionsContainer = el('options-container');

      function flash(kind) {
        const overlay = el('flash-overlay');
        overlay.className = '';
        void overlay.offsetWidth;
        overlay.classList.add(kind === 'correct' ? 'flash-correct' : 'flash-wrong');
      }

      function renderProgress(payload) {
        el('score').textContent = payload.score;
        el('count').textContent = `${payload.asked}/${payload.total}`;
      }

      function renderQuestion(payload) {
        renderProgress(payload);
        if (payload.finished) { renderSummary(payload.summary); return; }
        el('game-container').classList.remove('hidden');
        el('game-over').classList.add('hidden');
        el('feedback').classList.add('hidden');
        optionsContainer.innerHTML = '';
        const question = payload.question;
        if (!question) return;
        const flag = el('flag-img');
        flag.style.opacity = '0';
        const img = new Image();
        img.onload = () => { flag.src = img.src; flag.style.opacity = '1'; };
        img.src = question.flag_url;
        el('continent-hint').textContent = question.continent_hint;
        question.options.forEach(option => {
          const btn = document.createElement('button');
          btn.className = 'option-btn';
          btn.textContent = option.label;
          btn.dataset.code = option.code;
          btn.addEventListener('click', () => submitAnswer(option.code, btn));
          optionsContainer.appendChild(btn);
        });
      }

      function renderSummary(summary) {
        el('game-container').classList.add('hidden');
        el('game-over').classList.remove('hidden');
        const breakdown = el('stats-breakdown');
        breakdown.innerHTML = '';
        if (summary.mode === 'percentage') {
          el('final-score-value').textContent = `${summary.percentage}%`;
          el('final-message').textContent = summary.message;
          summary.breakdown.forEach(row => {
            const div = document.createElement('div');
            div.className = 'stat-row';
            const name = document.createElement('span');
            name.textContent = row.continent;
            const value = document.createElement('span');
            value.textContent = `${row.percentage}% (${row.correct}/${row.total})`;
            div.append(name, value);
            breakdown.appendChild(div);
          });
        } else {
          el('final-score-value').textContent = `${summary.score}`;
          el('final-message').textContent = `Best: ${summary.high_score}`;
        }
        playWin();
      }

      async function submitAnswer(code, btn) {
        const response = await fetch('/answer', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify({ code })
        });
        if (!response.ok) return;
        const result = await response.json();
        const buttons = optionsContainer.querySelectorAll('.option-btn');
        if (result.is_correct) {
          playWin();
          flash('correct');
          btn.classList.add('correct');
          el('feedback-text').textContent = 'Correct!';
        } else {
          playLose();
          flash('wrong');
          btn.classList.add('wrong');
          buttons.forEach(b => { if (b.dataset.code === result.correct_code) b.classList.add('correct'); });
          el('feedback-text').textContent = `Wrong! It was ${result.correct_name}.`;
        }
        el('score').textContent = result.score;
        buttons.forEach(b => b.disabled = true);
        el('feedback').classList.remove('hidden');
        el('next-btn').focus();
      }

      async function post(path) {
        const response = await fetch(path, { method: 'POST' });
        renderQuestion(await response.json());
      }

      el('next-btn').addEventListener('click', () => post('/next'));
      el('restart-btn').addEventListener('click', () => post('/start'));
      post('/start');
    </script>
  </body>
</html>
"""


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers."""

    code: str


def _get_controller_dependency(controller: GameController):
    def dependency() -> GameController:
        return controller

    return dependency


def _question_to_dict(view: QuestionView | None) -> dict[str, object] | None:
    if view is None:
        return None
    return {
        "flag_url": view.flag_url,
        "continent_hint": view.continent_hint,
        "options": [{"code": option.code, "label": option.label} for option in view.options],
    }


def _result_to_dict(result: AnswerResult | None) -> dict[str, object] | None:
    if result is None:
        return None
    return {
        "is_correct": result.is_correct,
        "selected_code": result.selected_code,
        "correct_code": result.correct_code,
        "correct_name": result.correct_name,
        "score": result.score,
    }


def _summary_to_dict(summary: SessionSummary | None) -> dict[str, object] | None:
    if summary is None:
        return None
    return {
        "mode": summary.mode.value,
        "score": summary.score,
        "total_questions": summary.total_questions,
        "percentage": summary.percentage,
        "message": summary.message,
        "breakdown": [
            {
                "continent": row.continent,
                "correct": row.correct,
                "total": row.total,
                "percentage": row.percentage,
            }
            for row in summary.breakdown
        ],
        "high_score": summary.high_score,
        "is_new_high_score": summary.is_new_high_score,
    }


def _state_payload(state: GameState) -> dict[str, object]:
    return {
        "started": state.started,
        "finished": state.finished,
        "score": state.score,
        "asked": state.asked_count,
        "total": state.total_count,
        "question": _question_to_dict(state.question),
        "awaiting_answer": state.awaiting_answer,
        "result": _result_to_dict(state.last_result),
        "summary": _summary_to_dict(state.summary),
    }


def create_api_app(controller: GameController) -> FastAPI:
    """Create a FastAPI application wired to the provided game controller."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    controller_dep = _get_controller_dependency(controller)

    @app.get("/", response_class=HTMLResponse)
    def serve_player_page() -> str:
        return _PLAYER_PAGE_HTML

    @app.post("/start")
    def start_game(game: GameController = Depends(controller_dep)) -> dict[str, object]:
        game.start()
        return _state_payload(game.get_state())

    @app.get("/question")
    def get_question(game: GameController = Depends(controller_dep)) -> dict[str, object]:
        return _state_payload(game.get_state())

    @app.post("/answer", status_code=201)
    def submit_answer(
        payload: AnswerPayload,
        game: GameController = Depends(controller_dep),
    ) -> dict[str, object]:
        try:
            result = game.answer_with_code(payload.code)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        if result is None:
            raise HTTPException(status_code=409, detail="No question is waiting for an answer.")
        return _result_to_dict(result)

    @app.post("/next")
    def next_question(game: GameController = Depends(controller_dep)) -> dict[str, object]:
        try:
            state = game.advance()
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        return _state_payload(state)

    @app.get("/summary")
    def get_summary(game: GameController = Depends(controller_dep)) -> dict[str, object]:
        summary = _summary_to_dict(game.get_summary())
        if summary is None:
            raise HTTPException(status_code=409, detail="The game is still in progress.")
        return summary

    return app


def start_api_server(
    controller: GameController,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve the browser version until interrupted."""
    app = create_api_app(controller)
    logger.info("Serving FlagQuiz at http://%s:%d/", host, port)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    uvicorn.Server(config).run()
