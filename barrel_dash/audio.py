# audio.py -- synthesized collision cue

from array import array

import pygame

from .settings import SAMPLE_RATE


def collision_samples(duration_ms=250, freq=220.0, gain=0.2, sample_rate=SAMPLE_RATE):
    """Signed 16-bit mono sawtooth at ``freq`` Hz."""
    n = int(sample_rate * duration_ms / 1000.0)
    arr = array('h')
    for i in range(n):
        phase = (i * freq / sample_rate) % 1.0
        saw = 2.0 * phase - 1.0
        arr.append(int(32767 * max(-1.0, min(1.0, saw * gain))))
    return arr


def interleave(samples, channels):
    # each mono sample repeated once per mixer channel
    if channels == 1:
        return samples
    out = array('h')
    for s in samples:
        out.extend([s] * channels)
    return out


def make_collision_sound(duration_ms=250):
    # mixer may already be running at its own rate and channel count
    rate, _size, channels = pygame.mixer.get_init()
    samples = collision_samples(duration_ms, sample_rate=rate)
    return pygame.mixer.Sound(buffer=interleave(samples, channels).tobytes())


class CollisionCue:
    """Fire-and-forget crash sound that degrades to silence."""

    def __init__(self, sound=None, muted=False):
        self.sound = sound
        self.muted = muted

    @classmethod
    def create(cls, muted=False):
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
                pygame.mixer.init()
            return cls(make_collision_sound(), muted)
        except Exception as e:
            print("[audio] mixer unavailable, playing silent:", e)
            return cls(None, muted)

    def toggle_mute(self):
        self.muted = not self.muted
        return self.muted

    def play(self):
        if self.muted or self.sound is None:
            return False
        try:
            self.sound.play()
            return True
        except Exception as e:
            print("[audio] failed to play collision cue:", e)
            return False
