SAMPLE_CSV = '''Timestamp,Student Name,Card Earned,Points,Notes
2024-09-12,Maya Lopez,Concert B♭ Scale,20,
2024-09-12,Jonah Reed,Rhythm Reading I,10,
2024-09-13,Maya Lopez,"Sight Reading, Level 1",15,"first try, ""clean"""
2024-09-14,Priya Shah,Chromatic Scale,25,
2024-09-15,Jonah Reed,Concert B♭ Scale,20,
2024-09-18,Priya Shah,Music Theory / Intervals,30,
2024-09-20,Maya Lopez,Chromatic Scale,25,
2024-09-21,Eli Brooks,Rhythm Reading I,10,
2024-09-22,Priya Shah,Solo Performance,60,
2024-09-25,Eli Brooks,Section Leader,abc,pending review
2024-09-26,Maya Lopez,Solo Performance,60,
2024-09-27,Priya Shah,Concert B♭ Scale,20,
2024-09-28,Sam Ortiz,,5,
2024-09-30,Priya Shah,All-State Audition,80,
2024-10-01,Maya Lopez,Music Theory / Intervals,30,
'''


def load_sample_csv() -> str:
    return SAMPLE_CSV
