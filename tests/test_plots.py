from band_achievements.grouping import students_frame
from band_achievements.io import load_students
from band_achievements.plots import leaderboard_bar


def test_leaderboard_bar_keeps_display_order(sample_csv):
    frame = students_frame(load_students(sample_csv))
    fig = leaderboard_bar(frame, limit=3)
    assert fig.layout.title.text == "Achievement points by student"
    assert list(fig.layout.xaxis.categoryarray) == ["Priya Shah", "Maya Lopez", "Jonah Reed"]


def test_leaderboard_bar_empty():
    fig = leaderboard_bar(students_frame([]))
    assert len(fig.data) == 0
