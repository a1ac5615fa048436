"""
Text formatters for XERT payloads.

Pure functions turning typed SDK records into plain text an LLM can read.
"""

from datetime import datetime, timezone
from typing import List, Optional

from xert_mcp.sdk.types import (
    WOTD_NONE,
    ActivityDetail,
    ActivitySummary,
    SessionDataPoint,
    StartDate,
    TrainingInfo,
    UploadResult,
    Workout,
    WorkoutDetail,
)

XERT_WEB_URL = "https://www.xertonline.com"

RULE = "=" * 60
THIN_RULE = "-" * 60

MEDALS = {1: "Gold", 2: "Silver", 3: "Bronze"}


def format_duration(seconds: float) -> str:
    """Format seconds as H:MM:SS, or M:SS under an hour.

    Returns "N/A" for missing or negative input.
    """
    if seconds is None or seconds < 0:
        return "N/A"
    seconds = int(seconds)
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    if h > 0:
        return f"{h}:{m:02d}:{s:02d}"
    return f"{m}:{s:02d}"


def format_date(start_date: Optional[StartDate]) -> str:
    """Format a XERT start date object, e.g. "Mon 15 Jan 2024, 07:30 (UTC)"."""
    if start_date is None or not start_date.date:
        return "N/A"
    try:
        parsed = datetime.strptime(start_date.date[:19], "%Y-%m-%d %H:%M:%S")
    except ValueError:
        return start_date.date
    return f"{parsed.strftime('%a %d %b %Y, %H:%M')} ({start_date.timezone})"


def _section(lines: List[str], title: str) -> None:
    lines.append(title)
    lines.append(THIN_RULE)


def format_training_info(info: TrainingInfo) -> str:
    lines = [RULE, "XERT Training Info", RULE, ""]

    sig = info.signature
    _section(lines, "FITNESS SIGNATURE")
    lines.append(f"   FTP (Threshold Power):       {round(sig.ftp)} W")
    lines.append(f"   LTP (Lower Threshold):       {round(sig.ltp)} W")
    lines.append(f"   HIE (High Intensity Energy): {sig.hie:.1f} kJ")
    lines.append(f"   PP (Peak Power):             {round(sig.pp)} W")
    lines.append("")

    _section(lines, "TRAINING STATUS")
    lines.append(f"   Status:  {info.status}")
    lines.append(f"   Weight:  {info.weight} kg")
    lines.append(f"   Source:  {info.source}")
    lines.append("")

    _section(lines, "CURRENT TRAINING LOAD (XSS)")
    lines.append(f"   Low Strain:   {info.tl.low:.1f}")
    lines.append(f"   High Strain:  {info.tl.high:.1f}")
    lines.append(f"   Peak Strain:  {info.tl.peak:.1f}")
    lines.append(f"   Total:        {info.tl.total:.1f}")
    lines.append("")

    _section(lines, "TARGET XSS (Recommended)")
    lines.append(f"   Low:   {info.target_xss.low:.1f}")
    lines.append(f"   High:  {info.target_xss.high:.1f}")
    lines.append(f"   Peak:  {info.target_xss.peak:.1f}")
    lines.append(f"   Total: {info.target_xss.total:.1f}")
    lines.append("")

    wotd = info.wotd
    if wotd and wotd.type != WOTD_NONE:
        _section(lines, "WORKOUT OF THE DAY")
        lines.append(f"   Type:       {wotd.type}")
        lines.append(f"   Name:       {wotd.name or 'N/A'}")
        lines.append(f"   Workout ID: {wotd.workout_id or 'N/A'}")
        if wotd.difficulty:
            lines.append(f"   Difficulty: {wotd.difficulty:.2f}")
        if wotd.description:
            lines.append(f"   Description: {wotd.description}")
        if wotd.url:
            lines.append(f"   Download:   {wotd.url}")
        lines.append("")

    lines.append(RULE)
    return "\n".join(lines)


def format_workout_list(workouts: List[Workout]) -> str:
    if not workouts:
        return "No workouts found."

    lines = [f"Found {len(workouts)} workout(s):", ""]
    for workout in workouts:
        lines.append(f"- {workout.name}")
        lines.append(f"   ID: {workout.path}")
        if workout.last_modified:
            modified = datetime.fromtimestamp(workout.last_modified, tz=timezone.utc)
            lines.append(f"   Modified: {modified.strftime('%Y-%m-%d')}")
        if workout.description:
            lines.append(f"   Description: {workout.description}")
        lines.append("")

    return "\n".join(lines)


def format_workout_detail(workout: WorkoutDetail) -> str:
    lines = [RULE, f"   WORKOUT: {workout.name}", RULE]

    if workout.description:
        lines.append("")
        lines.append(f"Description: {workout.description}")

    lines.append("")
    _section(lines, "INTERVALS:")
    for interval in workout.intervals:
        lines.append(f"   {interval.name} ({interval.interval_count}x)")
        lines.append(f"      Power: {round(interval.power)} W for {format_duration(interval.duration)}")
        if interval.power_rest is not None and interval.duration_rest is not None:
            lines.append(
                f"      Rest:  {round(interval.power_rest)} W for {format_duration(interval.duration_rest)}"
            )

    lines.append("")
    lines.append(RULE)
    return "\n".join(lines)


def format_activity_list(activities: List[ActivitySummary]) -> str:
    if not activities:
        return "No activities found in the specified time range."

    lines = [f"Found {len(activities)} activity/activities:", ""]
    for activity in activities:
        lines.append(f"- {activity.name}")
        lines.append(f"   ID: {activity.path}")
        lines.append(f"   Type: {activity.activity_type}")
        lines.append(f"   Date: {format_date(activity.start_date)}")
        if activity.description:
            lines.append(f"   Description: {activity.description}")
        lines.append("")

    return "\n".join(lines)


def format_activity_detail(activity: ActivityDetail) -> str:
    s = activity.summary
    lines = [RULE, f"   {activity.name}", RULE, ""]

    _section(lines, "BASIC INFO")
    lines.append(f"   Type:     {s.activity_type}")
    lines.append(f"   Date:     {format_date(s.start_date)}")
    lines.append(f"   Distance: {s.distance:.2f} km")
    lines.append(f"   Duration: {format_duration(s.duration)}")
    if activity.description:
        lines.append(f"   Notes:    {activity.description}")
    lines.append("")

    _section(lines, "XSS METRICS")
    lines.append(f"   Total XSS:     {s.xss:.1f}")
    lines.append(f"   Low Strain:    {s.xlss:.1f}")
    lines.append(f"   High Strain:   {s.xhss:.1f}")
    lines.append(f"   Peak Strain:   {s.xpss:.1f}")
    lines.append(f"   Focus:         {s.focus}")
    lines.append(f"   Specificity:   {s.specificity}")
    lines.append(f"   Difficulty:    {s.difficulty_rating}")
    lines.append("")

    _section(lines, "POWER METRICS")
    lines.append(f"   XEP (Xert Equivalent Power): {round(s.xep)} W")
    lines.append(f"   MEP (Mean Equivalent Power): {round(s.mep)} W")
    if s.session:
        lines.append(f"   Max Power:                   {round(s.session.max_power)} W")
        lines.append(f"   Avg Power:                   {round(s.session.avg_power)} W")
    lines.append("")

    if s.sig:
        _section(lines, "FITNESS SIGNATURE (After Activity)")
        lines.append(f"   FTP: {round(s.sig.ftp)} W")
        if s.sig.ltp:
            lines.append(f"   LTP: {round(s.sig.ltp)} W")
        if s.sig.hie:
            lines.append(f"   HIE: {s.sig.hie:.1f} kJ")
        lines.append(f"   PP:  {round(s.sig.pp)} W")
        lines.append("")

    if s.breakthrough or s.medal:
        _section(lines, "ACHIEVEMENTS")
        if s.breakthrough:
            lines.append("   BREAKTHROUGH!")
        if s.medal:
            lines.append(f"   Medal: {MEDALS.get(s.medal, s.medal)}")
        lines.append("")

    if s.freshness:
        _section(lines, "TRAINING STATUS")
        lines.append(f"   Freshness: {s.freshness}")
        if s.training_status:
            lines.append(f"   Status Score: {s.training_status:.2f}")
        lines.append("")

    if s.total_grams_carbs or s.total_grams_fat:
        _section(lines, "ESTIMATED NUTRITION")
        if s.total_grams_carbs:
            lines.append(f"   Carbs burned: {round(s.total_grams_carbs)} g")
        if s.total_grams_fat:
            lines.append(f"   Fat burned:   {round(s.total_grams_fat)} g")
        if s.session and s.session.total_calories:
            lines.append(f"   Total calories: {round(s.session.total_calories)} kcal")
        lines.append("")

    lines.append(RULE)
    return "\n".join(lines)


def format_session_summary(session_data: List[SessionDataPoint]) -> str:
    """Summarize per-second samples: count, minutes, max/avg power, lowest MPA."""
    lines = ["SESSION DATA SUMMARY", THIN_RULE]
    lines.append(f"   Data points: {len(session_data)}")
    lines.append(f"   Duration: {round(len(session_data) / 60)} minutes")

    powers = [p.power for p in session_data if p.power > 0]
    if powers:
        lines.append(f"   Max Power: {round(max(powers))} W")
        lines.append(f"   Avg Power: {round(sum(powers) / len(powers))} W")

    mpas = [p.mpa for p in session_data if p.mpa > 0]
    if mpas:
        lines.append(f"   Lowest MPA: {round(min(mpas))} W")

    lines.append("")
    lines.append("   (Full session_data array available in raw response)")
    return "\n".join(lines)


def format_upload_result(result: UploadResult) -> str:
    lines = ["FIT file uploaded successfully!", ""]

    if result.files:
        uploaded = result.files[0]
        lines.append(f"   File: {uploaded.name}")
        lines.append(f"   Size: {uploaded.size / 1024:.1f} KB")
        lines.append(f"   Activity URL: {XERT_WEB_URL}{uploaded.url}")
        lines.append("")

    lines.append("The activity will be processed by XERT. Use xert_list_activities to see it.")
    return "\n".join(lines)
