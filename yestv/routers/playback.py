from typing import Optional

from fastapi import APIRouter, Depends, status

from ..deps import get_playback
from ..playback import PlaybackLog
from ..schemas import PlaybackEventIn


router = APIRouter(prefix="/logs/playback", tags=["playback"])


@router.get("")
def list_playback(playback: PlaybackLog = Depends(get_playback)):
    return playback.list_entries()


@router.post("", status_code=status.HTTP_201_CREATED)
def record_playback(payload: Optional[PlaybackEventIn] = None, playback: PlaybackLog = Depends(get_playback)):
    data = payload.model_dump(by_alias=True) if payload else {}
    return playback.record(data)
