import logging
import math
from array import array
from collections import namedtuple

import pygame

from .clock import GameListener
from .config import SAMPLE_RATE, SOUND_ENABLED

logger = logging.getLogger(__name__)

# A single synthesizer request; duration and delay are in seconds.
Tone = namedtuple("Tone", ["frequency", "waveform", "duration", "volume", "delay"])

# Rising "coin" chirp.
EAT_CUE = (
    Tone(600, "sine", 0.1, 0.1, 0.0),
    Tone(900, "sine", 0.2, 0.1, 0.05),
)
# Descending crash.
GAME_OVER_CUE = (
    Tone(200, "sawtooth", 0.5, 0.2, 0.0),
    Tone(150, "sawtooth", 0.5, 0.2, 0.1),
    Tone(100, "sawtooth", 0.8, 0.2, 0.2),
)

DRONE_FREQUENCY = 50
DRONE_VOLUME = 0.05
DRONE_LFO_HZ = 2
DRONE_LFO_DEPTH = 0.02
DECAY_FLOOR = 0.01


def oscillator(waveform, phase):
    """Evaluate a unit-amplitude waveform at phase (in cycles)."""
    frac = phase % 1.0
    if waveform == "sine":
        return math.sin(2.0 * math.pi * frac)
    if waveform == "square":
        return 1.0 if frac < 0.5 else -1.0
    if waveform == "sawtooth":
        return 2.0 * frac - 1.0
    if waveform == "triangle":
        return 1.0 - 4.0 * abs(frac - 0.5)
    raise ValueError(f"unknown waveform {waveform!r}")


def render_pcm(tones, sample_rate=SAMPLE_RATE):
    """Mix a sequence of tones into one mono 16-bit PCM buffer.

    Each tone starts at its delay and decays exponentially from its volume
    down to DECAY_FLOOR over its duration.
    """
    end = max((t.delay + t.duration for t in tones), default=0.0)
    mix = [0.0] * max(1, int(sample_rate * end))

    for tone in tones:
        start = int(sample_rate * tone.delay)
        count = int(sample_rate * tone.duration)
        volume = max(DECAY_FLOOR, min(tone.volume, 1.0))
        ratio = DECAY_FLOOR / volume
        for i in range(count):
            if start + i >= len(mix):
                break
            progress = i / count
            env = volume * ratio ** progress
            mix[start + i] += env * oscillator(tone.waveform, tone.frequency * i / sample_rate)

    pcm = array("h")
    for sample in mix:
        pcm.append(int(32767 * max(-1.0, min(sample, 1.0))))
    return pcm


def render_drone(sample_rate=SAMPLE_RATE):
    """Render one second of the pulsing background drone.

    Both the carrier and the LFO complete whole cycles in a second, so the
    buffer loops without a click.
    """
    pcm = array("h")
    for i in range(sample_rate):
        t = i / sample_rate
        gain = DRONE_VOLUME + DRONE_LFO_DEPTH * math.sin(2.0 * math.pi * DRONE_LFO_HZ * t)
        sample = gain * oscillator("triangle", DRONE_FREQUENCY * t)
        pcm.append(int(32767 * sample))
    return pcm


class ToneSynth:
    """Plays PCM buffers through pygame.mixer, silently if audio is unavailable."""

    def __init__(self, enabled=SOUND_ENABLED, sample_rate=SAMPLE_RATE):
        self.sample_rate = sample_rate
        self.enabled = enabled and self._init_mixer()
        self._cache = {}
        self._drone_channel = None

    def _init_mixer(self):
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1, buffer=512)
            return True
        except pygame.error as e:
            logger.warning("Audio disabled: %s", e)
            return False

    def _sound(self, key, render):
        if key not in self._cache:
            self._cache[key] = pygame.mixer.Sound(buffer=render().tobytes())
        return self._cache[key]

    def play(self, tones):
        """Play a cue once, fire and forget."""
        if not self.enabled:
            return
        try:
            self._sound(tones, lambda: render_pcm(tones, self.sample_rate)).play()
        except pygame.error as e:
            logger.warning("Could not play cue: %s", e)

    def start_drone(self):
        """Loop the background drone; returns True if a mixer channel picked it up."""
        if not self.enabled:
            return False
        try:
            drone = self._sound("drone", lambda: render_drone(self.sample_rate))
            self._drone_channel = drone.play(loops=-1)
        except pygame.error as e:
            logger.warning("Could not start drone: %s", e)
            self._drone_channel = None
        return self._drone_channel is not None

    def stop_drone(self):
        """Silence the drone if it is playing."""
        if self._drone_channel is not None:
            self._drone_channel.stop()
            self._drone_channel = None


class AudioCues(GameListener):
    """Turns game events into synthesizer calls and owns the drone lifecycle."""

    def __init__(self, synth, muted=False):
        self.synth = synth
        self.muted = muted
        self.drone_playing = False

    def on_eat(self):
        """Rising two-tone chirp."""
        if not self.muted:
            self.synth.play(EAT_CUE)

    def on_crash(self):
        """Falling three-tone crash; also ends the drone."""
        if not self.muted:
            self.synth.play(GAME_OVER_CUE)
        self.stop_drone()

    def on_start(self):
        """Start the drone unless muted or already playing."""
        if self.muted or self.drone_playing:
            return
        self.drone_playing = bool(self.synth.start_drone())

    def stop_drone(self):
        if self.drone_playing:
            self.synth.stop_drone()
            self.drone_playing = False

    def toggle_mute(self, game_running):
        """Flip mute; unmuting mid-game brings the drone back."""
        self.muted = not self.muted
        logger.debug("Muted" if self.muted else "Unmuted")
        if self.muted:
            self.stop_drone()
        elif game_running:
            self.on_start()
        return self.muted

    # GameListener hooks
    def on_game_started(self):
        self.on_start()

    def on_food_eaten(self):
        self.on_eat()

    def on_game_over(self, final_score, collision):
        self.on_crash()
