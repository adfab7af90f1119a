"""Seed songs served when no backend is configured."""

from .models import Song

SAMPLE_SONGS: tuple[Song, ...] = (
    Song(
        id=1,
        title="Aseda Yɛ Wo De",
        artist="Daughters of Glorious Jesus",
        language="Twi",
        lyrics="""Verse 1:
Aseda yɛ wo de
Nhyira nso yɛ wo de
Wo yɛ ɔdɔ nyinaa mu kɛse
Medaase Awurade

Chorus:
Yɛ ma wo so
Yɛ da wo ase
Ɔdɔ a wodo yɛn
Ɛyɛ kɛse pa ara

Verse 2:
Woagye yɛn nkwa
Wo dwom yɛn nnwom
Wo de wo mogya atew yɛn ho
Medaase Awurade""",
        is_verified=True,
    ),
    Song(
        id=2,
        title="Meda W'ase",
        artist="Joe Mettle",
        language="Twi",
        lyrics="""Verse 1:
Meda w'ase
Meda w'ase
Wode wo ho ama me
Meda w'ase

Chorus:
Wo yɛ ɔdɔ
Wo yɛ ɔdom
Meda w'ase Awurade
Wo yɛ nyame""",
        is_verified=True,
    ),
    Song(
        id=3,
        title="Onyame Ne Wo",
        artist="Diana Hamilton",
        language="Twi",
        lyrics="""Verse 1:
Onyame ne wo
Wo nsa so me
Wotua me ɛkwan
Menkuro hwee

Chorus:
Wo yɛ me nyame
Wo yɛ me nkunim
Onyame ne wo
Forever and ever""",
        is_verified=True,
    ),
)
