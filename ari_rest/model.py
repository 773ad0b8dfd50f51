#!/usr/bin/env python

"""Model for mapping ARI resources and operations onto objects.

The API is modeled into the Repository pattern, as you would find in Domain
Driven Design.

Each ARI resource (channels, bridges, recordings, ...) is mapped onto a
Repository object, whose methods map one-to-one onto the resource's REST
endpoints. Identifiers go into the path; keyword arguments are sent as the
endpoint's parameters, using ARI's own parameter names:

    client.channels.originate(endpoint='PJSIP/100', app='demo',
                              variables={'CALLERID(name)': 'Alice'})

Responses are returned as decoded JSON (dicts and lists), or as a string
for endpoints which return no content.
"""

from urllib.parse import quote


__all__ = [
    'Repository',
    'AsteriskRepository',
    'BridgesRepository',
    'ChannelsRepository',
    'EndpointsRepository',
    'RecordingsRepository',
    'SoundsRepository',
    'ApplicationsRepository',
    'PlaybacksRepository',
    'DeviceStatesRepository',
    'MailboxesRepository',
]


def path(template, *ids):
    """Substitute percent-encoded identifiers into a path template.

    >>> path('channels/%s/play/%s', 'a b', 'pb/1')
    'channels/a%20b/play/pb%2F1'
    """
    return template % tuple(quote(str(i), safe='') for i in ids)


class Repository(object):
    """ARI repository.

    This repository maps to an ARI resource. The endpoints of the resource
    are mapped to methods on this object.

    :param client:  ARI client.
    :type  client:  client.Client
    """

    #: Resource name, as used in the ARI documentation.
    name = None

    def __init__(self, client):
        self.client = client

    def __repr__(self):
        return "Repository(%s)" % self.name


class AsteriskRepository(Repository):
    """Asterisk system information and global variables.
    """

    name = 'asterisk'

    def get_info(self, **params):
        """Gets Asterisk system information.

        :param only: Filter information returned (build, system, config,
                     status). Comma separated.
        """
        return self.client.get('asterisk/info', params)

    def get_global_var(self, **params):
        """Get the value of a global variable.

        :param variable: The variable to get (required).
        """
        return self.client.get('asterisk/variable', params)

    def set_global_var(self, **params):
        """Set the value of a global variable.

        :param variable: The variable to set (required).
        :param value: The value to set the variable to.
        """
        return self.client.post('asterisk/variable', params)


class BridgesRepository(Repository):
    name = 'bridges'

    def list(self):
        """List all active bridges in Asterisk.
        """
        return self.client.get('bridges')

    def create(self, **params):
        """Create a new bridge.

        :param type: Comma separated list of bridge type attributes
                     (mixing, holding, dtmf_events, proxy_media).
        :param bridgeId: Unique ID to give to the bridge being created.
        :param name: Name to give to the bridge being created.
        """
        return self.client.post('bridges', params)

    def create_or_update_with_id(self, bridge_id, **params):
        """Create a new bridge or update an existing one.
        """
        return self.client.post(path('bridges/%s', bridge_id), params)

    def get(self, bridge_id):
        return self.client.get(path('bridges/%s', bridge_id))

    def destroy(self, bridge_id):
        """Shut down a bridge.
        """
        return self.client.delete(path('bridges/%s', bridge_id))

    def add_channel(self, bridge_id, **params):
        """Add a channel to a bridge.

        :param channel: Ids of channels to add to bridge (required).
                        Comma separated.
        :param role: Channel's role in the bridge.
        """
        return self.client.post(
            path('bridges/%s/addChannel', bridge_id), params)

    def remove_channel(self, bridge_id, **params):
        """Remove a channel from a bridge.

        :param channel: Ids of channels to remove (required). Comma
                        separated.
        """
        return self.client.post(
            path('bridges/%s/removeChannel', bridge_id), params)

    def start_moh(self, bridge_id, **params):
        """Play music on hold to a bridge or change the MOH class.

        :param mohClass: Music on hold class to use.
        """
        return self.client.post(path('bridges/%s/moh', bridge_id), params)

    def stop_moh(self, bridge_id):
        return self.client.delete(path('bridges/%s/moh', bridge_id))

    def play(self, bridge_id, **params):
        """Start playback of media on a bridge.

        :param media: Media's URI to play (required).
        :param lang: For sounds, selects language for sound.
        :param offsetms: Number of milliseconds to skip before playing.
        :param skipms: Number of milliseconds to skip for forward/reverse.
        :param playbackId: Playback Id.
        """
        return self.client.post(path('bridges/%s/play', bridge_id), params)

    def play_with_id(self, bridge_id, playback_id, **params):
        return self.client.post(
            path('bridges/%s/play/%s', bridge_id, playback_id), params)

    def record(self, bridge_id, **params):
        """Start a recording.

        :param name: Recording's filename (required).
        :param format: Format to encode audio in (required).
        :param maxDurationSeconds: Maximum duration of the recording.
        :param maxSilenceSeconds: Maximum duration of silence.
        :param ifExists: Action to take if a recording with the same name
                         already exists (fail, overwrite, append).
        :param beep: Play beep when recording begins.
        :param terminateOn: DTMF input to terminate recording.
        """
        return self.client.post(path('bridges/%s/record', bridge_id), params)


class ChannelsRepository(Repository):
    name = 'channels'

    def list(self):
        """List all active channels in Asterisk.
        """
        return self.client.get('channels')

    def originate(self, **params):
        """Create a new channel (originate).

        :param endpoint: Endpoint to call (required).
        :param extension: The extension to dial after the endpoint answers.
        :param context: The context to dial after the endpoint answers.
        :param priority: The priority to dial after the endpoint answers.
        :param app: The application that is subscribed to the originated
                    channel.
        :param appArgs: The application arguments to pass to the Stasis
                        application.
        :param callerId: CallerID to use when dialing the endpoint.
        :param timeout: Timeout (in seconds) before giving up dialing.
        :param variables: Channel variables to set, as a dict.
        :param channelId: The unique id to assign the channel on creation.
        :param otherChannelId: The unique id to assign the second channel
                               when using local channels.
        """
        return self.client.post('channels', params)

    def get(self, channel_id):
        return self.client.get(path('channels/%s', channel_id))

    def originate_with_id(self, channel_id, **params):
        """Create a new channel with the given id; see originate().
        """
        return self.client.post(path('channels/%s', channel_id), params)

    def hangup(self, channel_id, **params):
        """Delete (i.e. hangup) a channel.

        :param reason: Reason for hanging up the channel.
        """
        return self.client.delete(path('channels/%s', channel_id), params)

    def continue_in_dialplan(self, channel_id, **params):
        """Exit application; continue execution in the dialplan.

        :param context: The context to continue to.
        :param extension: The extension to continue to.
        :param priority: The priority to continue to.
        """
        return self.client.post(
            path('channels/%s/continue', channel_id), params)

    def answer(self, channel_id):
        return self.client.post(path('channels/%s/answer', channel_id))

    def ring(self, channel_id):
        """Indicate ringing to a channel.
        """
        return self.client.post(path('channels/%s/ring', channel_id))

    def ring_stop(self, channel_id):
        return self.client.delete(path('channels/%s/ring', channel_id))

    def send_dtmf(self, channel_id, **params):
        """Send provided DTMF to a given channel.

        :param dtmf: DTMF To send.
        :param before: Amount of time to wait before DTMF digits start.
        :param between: Amount of time in between DTMF digits.
        :param duration: Length of each DTMF digit (in ms).
        :param after: Amount of time to wait after DTMF digits end.
        """
        return self.client.post(path('channels/%s/dtmf', channel_id), params)

    def mute(self, channel_id, **params):
        """Mute a channel.

        :param direction: Direction in which to mute audio (both, in, out).
        """
        return self.client.post(path('channels/%s/mute', channel_id), params)

    def unmute(self, channel_id, **params):
        return self.client.delete(
            path('channels/%s/mute', channel_id), params)

    def hold(self, channel_id):
        return self.client.post(path('channels/%s/hold', channel_id))

    def unhold(self, channel_id):
        return self.client.delete(path('channels/%s/hold', channel_id))

    def start_moh(self, channel_id, **params):
        """Play music on hold to a channel.

        :param mohClass: Music on hold class to use.
        """
        return self.client.post(path('channels/%s/moh', channel_id), params)

    def stop_moh(self, channel_id):
        return self.client.delete(path('channels/%s/moh', channel_id))

    def start_silence(self, channel_id):
        """Play silence to a channel.
        """
        return self.client.post(path('channels/%s/silence', channel_id))

    def stop_silence(self, channel_id):
        return self.client.delete(path('channels/%s/silence', channel_id))

    def play(self, channel_id, **params):
        """Start playback of media.

        :param media: Media's URI to play (required).
        :param lang: For sounds, selects language for sound.
        :param offsetms: Number of milliseconds to skip before playing.
        :param skipms: Number of milliseconds to skip for forward/reverse.
        :param playbackId: Playback Id.
        """
        return self.client.post(path('channels/%s/play', channel_id), params)

    def play_with_id(self, channel_id, playback_id, **params):
        return self.client.post(
            path('channels/%s/play/%s', channel_id, playback_id), params)

    def record(self, channel_id, **params):
        """Start a recording; see BridgesRepository.record() for parameters.
        """
        return self.client.post(
            path('channels/%s/record', channel_id), params)

    def get_channel_var(self, channel_id, **params):
        """Get the value of a channel variable or function.

        :param variable: The channel variable or function to get (required).
        """
        return self.client.get(
            path('channels/%s/variable', channel_id), params)

    def set_channel_var(self, channel_id, **params):
        """Set the value of a channel variable or function.

        :param variable: The channel variable or function to set (required).
        :param value: The value to set the variable to.
        """
        return self.client.post(
            path('channels/%s/variable', channel_id), params)

    def snoop_channel(self, channel_id, **params):
        """Start snooping.

        :param spy: Direction of audio to spy on (none, both, out, in).
        :param whisper: Direction of audio to whisper into (none, both, out,
                        in).
        :param app: Application the snooping channel is placed into
                    (required).
        :param appArgs: The application arguments to pass to the Stasis
                        application.
        :param snoopId: Unique ID to assign to snooping channel.
        """
        return self.client.post(
            path('channels/%s/snoop', channel_id), params)

    def snoop_channel_with_id(self, channel_id, snoop_id, **params):
        return self.client.post(
            path('channels/%s/snoop/%s', channel_id, snoop_id), params)


class EndpointsRepository(Repository):
    name = 'endpoints'

    def list(self):
        """List all endpoints.
        """
        return self.client.get('endpoints')

    def send_message(self, **params):
        """Send a message to some technology URI or endpoint.

        :param to: The endpoint resource or technology specific URI to send
                   the message to (required).
        :param from: The endpoint resource or technology specific identity
                     to send this message from (required). Pass it as
                     ``**{'from': ...}``.
        :param body: The body of the message.
        :param variables: Technology specific key/value pairs, as a dict.
        """
        return self.client.put('endpoints/sendMessage', params)

    def list_by_tech(self, tech):
        """List available endpoints for a given endpoint technology.
        """
        return self.client.get(path('endpoints/%s', tech))

    def get(self, tech, resource):
        return self.client.get(path('endpoints/%s/%s', tech, resource))

    def send_message_to_endpoint(self, tech, resource, **params):
        """Send a message to some endpoint in a technology.

        Takes the same parameters as send_message(), minus ``to``.
        """
        return self.client.put(
            path('endpoints/%s/%s/sendMessage', tech, resource), params)


class RecordingsRepository(Repository):
    """Stored and live recordings.
    """

    name = 'recordings'

    def list_stored(self):
        return self.client.get('recordings/stored')

    def get_stored(self, recording_name):
        return self.client.get(path('recordings/stored/%s', recording_name))

    def delete_stored(self, recording_name):
        return self.client.delete(
            path('recordings/stored/%s', recording_name))

    def copy_stored(self, recording_name, **params):
        """Copy a stored recording.

        :param destinationRecordingName: The destination name of the
                                         recording (required).
        """
        return self.client.post(
            path('recordings/stored/%s/copy', recording_name), params)

    def get_live(self, recording_name):
        return self.client.get(path('recordings/live/%s', recording_name))

    def cancel(self, recording_name):
        """Stop a live recording and discard it.
        """
        return self.client.delete(path('recordings/live/%s', recording_name))

    def stop(self, recording_name):
        """Stop a live recording and store it.
        """
        return self.client.post(
            path('recordings/live/%s/stop', recording_name))

    def pause(self, recording_name):
        return self.client.post(
            path('recordings/live/%s/pause', recording_name))

    def unpause(self, recording_name):
        return self.client.delete(
            path('recordings/live/%s/pause', recording_name))

    def mute(self, recording_name):
        return self.client.post(
            path('recordings/live/%s/mute', recording_name))

    def unmute(self, recording_name):
        return self.client.delete(
            path('recordings/live/%s/mute', recording_name))


class SoundsRepository(Repository):
    name = 'sounds'

    def list(self, **params):
        """List all sounds.

        :param lang: Lookup sound for a specific language.
        :param format: Lookup sound in a specific format.
        """
        return self.client.get('sounds', params)

    def get(self, sound_id):
        return self.client.get(path('sounds/%s', sound_id))


class ApplicationsRepository(Repository):
    name = 'applications'

    def list(self):
        return self.client.get('applications')

    def get(self, application_name):
        return self.client.get(path('applications/%s', application_name))

    def subscribe(self, application_name, **params):
        """Subscribe an application to an event source.

        :param eventSource: URI for event source (channel:{channelId},
                            bridge:{bridgeId}, endpoint:{tech}/{resource},
                            deviceState:{deviceName}). Comma separated.
        """
        return self.client.post(
            path('applications/%s/subscription', application_name), params)

    def unsubscribe(self, application_name, **params):
        """Unsubscribe an application from an event source.

        :param eventSource: See subscribe().
        """
        return self.client.delete(
            path('applications/%s/subscription', application_name), params)


class PlaybacksRepository(Repository):
    name = 'playbacks'

    def get(self, playback_id):
        return self.client.get(path('playbacks/%s', playback_id))

    def stop(self, playback_id):
        """Stop a playback.
        """
        return self.client.delete(path('playbacks/%s', playback_id))

    def control(self, playback_id, **params):
        """Control a playback.

        :param operation: Operation to perform on the playback (restart,
                          pause, unpause, reverse, forward). Required.
        """
        return self.client.post(
            path('playbacks/%s/control', playback_id), params)


class DeviceStatesRepository(Repository):
    name = 'deviceStates'

    def list(self):
        return self.client.get('deviceStates')

    def get(self, device_name):
        return self.client.get(path('deviceStates/%s', device_name))

    def update(self, device_name, **params):
        """Change the state of a device controlled by ARI.

        :param deviceState: Device state value (required).
        """
        return self.client.put(path('deviceStates/%s', device_name), params)

    def delete(self, device_name):
        """Destroy a device-state controlled by ARI.
        """
        return self.client.delete(path('deviceStates/%s', device_name))


class MailboxesRepository(Repository):
    name = 'mailboxes'

    def list(self):
        return self.client.get('mailboxes')

    def get(self, mailbox_name):
        return self.client.get(path('mailboxes/%s', mailbox_name))

    def update(self, mailbox_name, **params):
        """Change the state of a mailbox.

        :param oldMessages: Count of old messages in the mailbox (required).
        :param newMessages: Count of new messages in the mailbox (required).
        """
        return self.client.put(path('mailboxes/%s', mailbox_name), params)

    def delete(self, mailbox_name):
        return self.client.delete(path('mailboxes/%s', mailbox_name))
