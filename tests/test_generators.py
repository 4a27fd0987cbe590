"""Unit tests for the built-in animation generators."""

import random
import re

import pytest

from kiianigen.animation import generators as g
from kiianigen.models import DeviceGeometry
from kiianigen.models.animation import plain_loop, stretched_loop
from kiianigen.models.conf import DEMO_CONF

PIXEL_RE = re.compile(r"P\[([^\]]+)\]\((\d+),(\d+),(\d+)\)")


def parse_frame(frame: str) -> list[tuple[str, tuple[int, int, int]]]:
    """Split a serialized frame into (address, rgb) pairs."""
    return [
        (address, (int(r), int(g_), int(b)))
        for address, r, g_, b in PIXEL_RE.findall(frame)
    ]


def colors_by_id(frame: str) -> dict[int, tuple[int, int, int]]:
    return {int(address): rgb for address, rgb in parse_frame(frame)}


def base_frame(ids, rgb) -> str:
    return ",".join(f"P[{i}]({rgb[0]},{rgb[1]},{rgb[2]})" for i in ids)


class TestDodgyPixel:
    """Test dodgy_pixel."""

    @pytest.mark.unit
    def test_frame_count(self, geometry, rng):
        """One background frame plus max_frames blink frames."""
        animation = g.dodgy_pixel(geometry, None, None, 5, rng=rng)
        assert animation.frame_count == 6
        assert animation.settings == str(plain_loop(1))

    @pytest.mark.unit
    def test_background_covers_grid(self, geometry, rng):
        """The first frame paints every grid cell."""
        animation = g.dodgy_pixel(geometry, None, None, 5, rng=rng)
        commands = parse_frame(animation.frames[0])
        assert len(commands) == 6 * 22
        assert commands[0] == ("r:0,c:0", (25, 25, 25))
        assert commands[-1] == ("r:5,c:21", (25, 25, 25))

    @pytest.mark.unit
    def test_blink_frames(self, geometry, rng):
        """Each blink restores the previous cell and lights a new one."""
        animation = g.dodgy_pixel(geometry, [204, 204, 204], [0, 0, 255], 5, rng=rng)
        first = parse_frame(animation.frames[1])
        assert len(first) == 1
        assert first[0][1] == (204, 204, 204)

        for previous, current in zip(animation.frames[1:], animation.frames[2:]):
            restored, lit = parse_frame(current)
            assert restored == (parse_frame(previous)[-1][0], (0, 0, 255))
            assert lit[1] == (204, 204, 204)

    @pytest.mark.unit
    def test_positions_inside_grid(self, geometry, rng):
        """Random cells stay inside the grid."""
        animation = g.dodgy_pixel(geometry, rng=rng)
        assert animation.frame_count == 51
        for frame in animation.frames[1:]:
            for address, rgb in parse_frame(frame):
                row, col = (int(part[2:]) for part in address.split(","))
                assert 0 <= row <= 5
                assert 0 <= col <= 21
                assert all(0 <= channel <= 255 for channel in rgb)

    @pytest.mark.unit
    def test_zero_frames(self, geometry, rng):
        """Only the background remains."""
        assert g.dodgy_pixel(geometry, None, None, 0, rng=rng).frame_count == 1


class TestWhiteNoise:
    """Test white_noise."""

    @pytest.mark.unit
    def test_defaults(self, geometry, rng):
        """Twenty frames over every LED."""
        animation = g.white_noise(geometry, rng=rng)
        assert animation.frame_count == 20
        assert animation.settings == "framedelay:1, loop, replace:all"
        ids = [int(address) for address, _ in parse_frame(animation.frames[0])]
        assert ids == list(range(1, 120))

    @pytest.mark.unit
    def test_gray_below_cap(self, geometry, rng):
        """Every pixel is gray and below the noise cap."""
        animation = g.white_noise(geometry, 3, rng=rng)
        assert animation.frame_count == 3
        for frame in animation.frames:
            for _, (r, g_, b) in parse_frame(frame):
                assert r == g_ == b
                assert 0 <= r < g.noise.NOISE_MAX_INTENSITY

    @pytest.mark.unit
    def test_seeded_reproducible(self, geometry):
        """Same seed, same static."""
        first = g.white_noise(geometry, 2, rng=random.Random(9))
        second = g.white_noise(geometry, 2, rng=random.Random(9))
        assert first == second

    @pytest.mark.unit
    @pytest.mark.parametrize("max_frames", [0, -3])
    def test_non_positive_frame_count(self, geometry, rng, max_frames):
        """A frame count that is not positive falls back to 20."""
        assert g.white_noise(geometry, max_frames, rng=rng).frame_count == 20


class TestEscapeTest:
    """Test escape_test."""

    @pytest.mark.unit
    def test_flashes_two_keys(self, geometry, rng):
        """Ten frames of random reds on pixels 1 and 16."""
        animation = g.escape_test(geometry, rng=rng)
        assert animation.frame_count == 10
        for frame in animation.frames:
            commands = parse_frame(frame)
            assert [address for address, _ in commands] == ["1", "16"]
            assert all(rgb[1] == rgb[2] == 0 for _, rgb in commands)


class TestKitt2000:
    """Test kitt2000."""

    @pytest.mark.unit
    def test_frame_count_and_settings(self, geometry):
        """52 track positions forward, 49 back."""
        animation = g.kitt2000(geometry)
        assert animation.frame_count == 101
        assert animation.settings == "framedelay:2, framestretch, loop, replace:all, pfunc:interp"

    @pytest.mark.unit
    def test_first_frame(self, geometry):
        """At the left edge the trail is off the board."""
        animation = g.kitt2000(geometry)
        assert animation.frames[0] == (
            "P[c:-2%](0,0,0),P[c:0%](204,0,0),P[c:10%](0,0,0),"
            "P[c:100%](0,0,0),P[c:102%](0,0,0)"
        )

    @pytest.mark.unit
    def test_middle_frame(self, geometry):
        """In the middle the gradient is fully on the board."""
        animation = g.kitt2000(geometry)
        assert animation.frames[10] == (
            "P[c:-2%](0,0,0),P[c:0%](0,0,0),P[c:10%](0,0,0),P[c:20%](204,0,0),"
            "P[c:30%](0,0,0),P[c:100%](0,0,0),P[c:102%](0,0,0)"
        )

    @pytest.mark.unit
    def test_trail_reaches_right_edge(self, geometry):
        """Once the trail would pass 100% it is no longer drawn ahead of the head."""
        animation = g.kitt2000(geometry)
        assert animation.frames[47] == (
            "P[c:-2%](0,0,0),P[c:0%](0,0,0),P[c:84%](0,0,0),"
            "P[c:94%](204,0,0),P[c:102%](0,0,0)"
        )

    @pytest.mark.unit
    def test_last_forward_frame(self, geometry):
        """At the end of the track the right edge takes a trail color."""
        animation = g.kitt2000(geometry)
        assert animation.frames[51] == (
            "P[c:-2%](0,0,0),P[c:0%](0,0,0),P[c:92%](0,0,0),"
            "P[c:102%](204,0,0),P[c:100%](102,0,0),P[c:102%](0,0,0)"
        )

    @pytest.mark.unit
    def test_first_return_frame(self, geometry):
        """The return sweep starts one step back from the end."""
        animation = g.kitt2000(geometry)
        assert animation.frames[52] == (
            "P[c:-2%](0,0,0),P[c:0%](0,0,0),P[c:90%](0,0,0),"
            "P[c:100%](204,0,0),P[c:100%](153,0,0),P[c:102%](0,0,0)"
        )

    @pytest.mark.unit
    def test_frames_are_bracketed(self, geometry):
        """Every frame anchors the background just off both edges."""
        for frame in g.kitt2000(geometry).frames:
            assert frame.startswith("P[c:-2%](0,0,0),")
            assert frame.endswith(",P[c:102%](0,0,0)")

    @pytest.mark.unit
    def test_custom_colors(self, geometry):
        """Head color is the first step of the bleed."""
        animation = g.kitt2000(geometry, [255, 102, 0], [0, 0, 16])
        assert "P[c:0%](204,82,3)" in animation.frames[0]
        assert animation.frames[0].startswith("P[c:-2%](0,0,16)")

    @pytest.mark.unit
    def test_narrow_width(self, geometry):
        """A width below 2 still produces the full sweep."""
        assert g.kitt2000(geometry, None, None, 1).frame_count == 101


class TestBluewipe:
    """Test bluewipe."""

    @pytest.mark.unit
    def test_wipe(self, geometry):
        """Row wipe down and back up."""
        animation = g.bluewipe(geometry)
        assert animation.frame_count == 107
        assert animation.settings == str(stretched_loop(3))
        assert animation.frames[0] == (
            "P[r:-2%](93,93,93),P[r:-4%](0,26,255),P[r:102%](93,93,93)"
        )
        assert "P[r:100%](0,26,255)" in animation.frames[52]
        assert "P[r:-4%](0,26,255)" in animation.frames[-1]


class TestPulses:
    """Test the whole keyboard pulses and breaths."""

    @pytest.mark.unit
    def test_mac_sleep_breath(self, geometry):
        """12 breaths a minute at framedelay 3."""
        animation = g.mac_sleep_breath(geometry)
        assert animation.frame_count == 166
        assert animation.settings == str(stretched_loop(3))
        assert animation.frames[0] == "P[c:-1%](255,255,255),P[c:101%](255,255,255)"

    @pytest.mark.unit
    def test_mac_sleep_breath_slower(self, geometry):
        """Fewer breaths per minute means more frames."""
        assert g.mac_sleep_breath(geometry, None, None, 6).frame_count == 332

    @pytest.mark.unit
    @pytest.mark.parametrize("breaths_per_minute", [0, -4])
    def test_mac_sleep_breath_non_positive_rate(self, geometry, breaths_per_minute):
        """A rate that is not positive falls back to 12 breaths a minute."""
        animation = g.mac_sleep_breath(geometry, None, None, breaths_per_minute)
        assert animation == g.mac_sleep_breath(geometry)

    @pytest.mark.unit
    def test_blue_green_breath(self, geometry):
        """Starts green."""
        animation = g.blue_green_breath(geometry)
        assert animation.frame_count == 166
        assert animation.frames[0] == "P[c:-1%](0,255,0),P[c:101%](0,255,0)"

    @pytest.mark.unit
    def test_red_pulse(self, geometry):
        """Linear pulse between red-orange and black."""
        animation = g.red_pulse(geometry)
        assert animation.frame_count == 480
        assert animation.frames[0] == "P[c:-1%](255,25,0),P[c:101%](255,25,0)"
        assert animation.frames[240] == "P[c:-1%](0,0,0),P[c:101%](0,0,0)"

    @pytest.mark.unit
    def test_linear_pulse_colors(self, geometry):
        """Custom endpoints."""
        animation = g.linear_pulse(geometry, [0, 0, 255], [10, 10, 10])
        assert animation.frame_count == 480
        assert animation.frames[0] == "P[c:-1%](0,0,255),P[c:101%](0,0,255)"
        assert animation.frames[240] == "P[c:-1%](10,10,10),P[c:101%](10,10,10)"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "generator, frame_count",
        [
            (g.blue_yellow_pulse, 480),
            (g.rgb_pulse, 360),
            (g.rgb_zebra_pulse, 720),
        ],
    )
    def test_pulse_lengths(self, geometry, generator, frame_count):
        """Frames per color times palette size."""
        animation = generator(geometry)
        assert animation.frame_count == frame_count
        for frame in animation.frames:
            assert len(parse_frame(frame)) == 2


class TestZones:
    """Test the zone aware generators."""

    @pytest.mark.unit
    def test_base_top_breath(self, geometry):
        """Top and base start on opposite colors."""
        animation = g.base_top_breath(geometry)
        assert animation.frame_count == 166
        assert animation.frames[0] == (
            "P[1](0,255,0),P[87](0,255,0),P[88](0,0,255),P[119](0,0,255)"
        )

    @pytest.mark.unit
    def test_base_top_breath_opposite_phase(self, geometry):
        """Halfway through, the colors have swapped."""
        animation = g.base_top_breath(geometry, [255, 0, 0], [0, 0, 255])
        halfway = colors_by_id(animation.frames[83])
        assert halfway[1] == (0, 0, 255)
        assert halfway[88] == (255, 0, 0)

    @pytest.mark.unit
    @pytest.mark.parametrize("breaths_per_minute", [0, -1.5])
    def test_base_top_breath_non_positive_rate(self, geometry, breaths_per_minute):
        """A rate that is not positive falls back to 12 breaths a minute."""
        animation = g.base_top_breath(geometry, None, None, breaths_per_minute)
        assert animation.frame_count == 166

    @pytest.mark.unit
    def test_blue_green_base_top_breath_spin(self, geometry):
        """Top anchors plus the spinning base gradient."""
        animation = g.blue_green_base_top_breath_spin(geometry)
        assert animation.frame_count == 64
        assert animation.settings == str(stretched_loop(10))
        commands = parse_frame(animation.frames[0])
        assert len(commands) == 34
        assert commands[:4] == [
            ("1", (0, 255, 0)),
            ("87", (0, 255, 0)),
            ("119", (0, 0, 0)),
            ("88", (0, 0, 8)),
        ]

    @pytest.mark.unit
    def test_spin_rotates_one_led_per_frame(self, geometry):
        """The dark end of the gradient moves one LED each frame."""
        animation = g.top_and_bottom2(geometry)
        dark = [parse_frame(frame)[2][0] for frame in animation.frames[:3]]
        assert dark == ["119", "118", "117"]

    @pytest.mark.unit
    def test_top_and_bottom(self, geometry):
        """Blank LEDs green, keyed LEDs blue."""
        animation = g.top_and_bottom(geometry)
        assert animation.frame_count == 1
        assert animation.settings == "framedelay:5, loop, replace:all"
        colors = colors_by_id(animation.frames[0])
        assert len(colors) == 119
        assert colors[88] == (0, 255, 0)
        assert colors[1] == (0, 0, 255)

    @pytest.mark.unit
    def test_top_and_bottom2(self, geometry):
        """One frame per base LED."""
        animation = g.top_and_bottom2(geometry)
        assert animation.frame_count == 32
        assert animation.settings == "framedelay:5, loop, replace:all, pfunc:interp"
        assert animation.frames[0].startswith(
            "P[1](0,255,0),P[87](0,255,0),P[119](0,0,0),P[88](0,0,8)"
        )

    @pytest.mark.unit
    def test_key_group_cycler(self, geometry):
        """Every resolvable key of every group, every frame."""
        animation = g.key_group_cycler(geometry)
        assert animation.frame_count == 32
        assert animation.settings == "framedelay:10, framestretch, loop, replace:all"
        assert len(parse_frame(animation.frames[0])) == 111

    @pytest.mark.unit
    def test_key_group_cycler_staggers_groups(self, geometry):
        """Each group starts one palette color further."""
        animation = g.key_group_cycler(geometry, 4, [[255, 0, 0], [0, 255, 0], [0, 0, 255]])
        assert animation.frame_count == 12
        colors = colors_by_id(animation.frames[0])
        assert colors[1] == (255, 0, 0)  # function keys
        assert colors[0x11] == (0, 255, 0)  # left group
        assert colors[0x12] == (0, 0, 255)  # letters

    @pytest.mark.unit
    def test_key_group_cycler_without_scan_codes(self):
        """Only the literal base range remains without a device config."""
        animation = g.key_group_cycler(DeviceGeometry())
        assert len(parse_frame(animation.frames[0])) == 32


class TestVerticalPulseWithTracers:
    """Test vertical_pulse_with_tracers."""

    @pytest.mark.unit
    def test_defaults(self, geometry):
        """Paths padded to 22 slots so 66 frames hold whole laps."""
        animation = g.vertical_pulse_with_tracers(geometry)
        assert animation.frame_count == 66
        assert animation.settings == str(stretched_loop(5))

    @pytest.mark.unit
    def test_first_frame(self, geometry):
        """Tracers start in the padding so the base is dim."""
        animation = g.vertical_pulse_with_tracers(geometry)
        expected = "P[1](0,255,0),P[87](0,255,0)," + base_frame(range(88, 120), (0, 0, 13))
        assert animation.frames[0] == expected

    @pytest.mark.unit
    def test_frames_sorted_by_id(self, geometry):
        """Every base LED appears once, in id order."""
        animation = g.vertical_pulse_with_tracers(geometry)
        for frame in animation.frames:
            ids = [int(address) for address, _ in parse_frame(frame)]
            assert ids == sorted(ids)

    @pytest.mark.unit
    def test_tracers_light_both_sides(self, geometry):
        """Tracer heads run up both sides of the base from the front center."""
        animation = g.vertical_pulse_with_tracers(geometry)
        colors = colors_by_id(animation.frames[3])
        dim = colors[100]
        bright = {led_id for led_id in range(88, 120) if colors[led_id] != dim}
        assert bright == {92, 93, 94, 95, 96}

    @pytest.mark.unit
    def test_demo_params(self, geometry):
        """17 steps with three colors needs no padding."""
        params = DEMO_CONF["animations"]["Quick RGB with Tracers"]["params"]
        animation = g.vertical_pulse_with_tracers(geometry, *params)
        assert animation.frame_count == 51

    @pytest.mark.unit
    def test_minimum_steps(self, geometry):
        """Steps below the path length are raised to it."""
        short = g.vertical_pulse_with_tracers(geometry, 4, [[255, 0, 0], [0, 0, 255]])
        assert short.frame_count == g.vertical_pulse_with_tracers(
            geometry, 17, [[255, 0, 0], [0, 0, 255]]
        ).frame_count


class TestSyncedTracerPaths:
    """Test the tracer path padding."""

    @pytest.mark.unit
    def test_no_padding_needed(self):
        """Whole laps keep the paths untouched."""
        left, right, steps = g.tracers.synced_tracer_paths(range(17), range(17), 17, 3)
        assert len(left) == len(right) == 17
        assert steps == 17

    @pytest.mark.unit
    def test_padding(self):
        """Padding is empty slots, and steps grow to match."""
        left, right, steps = g.tracers.synced_tracer_paths(range(17), range(17), 32, 2)
        assert len(left) == 22
        assert left[17:] == [None] * 5
        assert right[17:] == [None] * 5
        assert steps == 33
